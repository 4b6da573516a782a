import contextlib
import socket
import socketserver
import threading
from unittest import mock

import pytest

from potprobe.helpcheck import analyze_help_response, check_help

_PROBE = b"SSH-2.0-9.53b\r\n\x00\x00\x00\x04\x0ahelp"


@contextlib.contextmanager
def _serve(handle):
    class _Handler(socketserver.BaseRequestHandler):
        def handle(self):
            self.request.settimeout(5)
            with contextlib.suppress(OSError):
                handle(self.request)

    with socketserver.ThreadingTCPServer(("127.0.0.1", 0), _Handler) as server:
        threading.Thread(target=server.serve_forever, daemon=True).start()
        try:
            yield "%s:%d" % server.server_address
        finally:
            server.shutdown()


def _read_probe(conn):
    received = b""
    while not received.endswith(b"help"):
        chunk = conn.recv(64)
        if not chunk:
            break
        received += chunk
    return received


@pytest.mark.parametrize(
    "response, score",
    [
        ("Welcome to cowrie", 99),
        ("kippo help", 99),
        ("generic HONEYPOT", 95),
        ("Available commands: ls", 90),
        ("HELP me", 80),
        ("invalid thing", 60),
        ("hello", 50),
        ("   ", 10),
        ("", 10),
    ],
)
def test_analyze_help_response_scores(response, score):
    _, result = analyze_help_response(response)
    assert result == score


@pytest.mark.parametrize(
    "response, message",
    [
        ("  Welcome to cowrie \n", "☣️ Cowrie honeypot detected: Welcome to cowrie"),
        ("", "✅ Normal: No response to 'help'"),
    ],
)
def test_analyze_help_response_messages(response, message):
    assert analyze_help_response(response)[0] == message


def test_analyze_help_response_long_reply_is_truncated():
    response = "z" * 250
    message, score = analyze_help_response(response)
    assert score == 85
    assert message.endswith(response[:100] + "...")


@mock.patch("time.sleep")
def test_check_help_sends_probe_and_grades_reply(_sleeper):
    received = []

    def handler(conn):
        received.append(_read_probe(conn))
        conn.sendall(b"cowrie honeypot\n")

    with _serve(handler) as target:
        message, score = check_help(target)
    assert score == 99
    assert message.startswith("☣️ Cowrie honeypot detected")
    assert received == [_PROBE]


@mock.patch("time.sleep")
def test_check_help_closed_by_server(_sleeper):
    with _serve(_read_probe) as target:
        message, score = check_help(target)
    assert score == 10
    assert message.startswith("✅ Connection closed (normal)")


@mock.patch("time.sleep")
def test_check_help_connection_refused(_sleeper):
    spare = socket.create_server(("127.0.0.1", 0))
    target = "127.0.0.1:%d" % spare.getsockname()[1]
    spare.close()
    message, score = check_help(target)
    assert score == 0
    assert message.startswith("❌ Connection error")