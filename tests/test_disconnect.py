import contextlib
import itertools
import socket
import threading
from unittest import mock

import pytest

from potprobe.disconnect import check_disconnect, check_temp_block, classify_disconnect


@contextlib.contextmanager
def _serve(handler, limit=None):
    """Serve connections one at a time; stop listening after ``limit`` of them."""
    listener = socket.create_server(("127.0.0.1", 0))
    listener.settimeout(0.1)
    address = "127.0.0.1:%d" % listener.getsockname()[1]
    stop = threading.Event()

    def next_connection():
        while not stop.is_set():
            try:
                return listener.accept()[0]
            except socket.timeout:
                continue
        return None

    def run():
        for index in itertools.count(1):
            try:
                conn = next_connection()
            except OSError:
                return
            if conn is None:
                return
            if index == limit:
                listener.close()
            with conn, contextlib.suppress(OSError):
                conn.settimeout(5)
                handler(conn, index)

    worker = threading.Thread(target=run, daemon=True)
    worker.start()
    try:
        yield address
    finally:
        stop.set()
        worker.join(timeout=5)
        listener.close()


def _refused():
    with socket.create_server(("127.0.0.1", 0)) as spare:
        return "127.0.0.1:%d" % spare.getsockname()[1]


def _banner(conn, _index):
    conn.sendall(b"SSH-2.0-OpenSSH_9.6\r\n")


def _silent(conn, _index):
    return None


def _late_banner(conn, index):
    if index > 1:
        _banner(conn, index)


@pytest.mark.parametrize(
    "first, reconnected, second, blocked, score",
    [
        (True, False, False, True, 90),
        (True, False, False, False, 85),
        (False, False, False, False, 0),
        (True, True, False, False, 60),
        (False, True, False, False, 40),
        (True, True, True, False, 10),
        (False, True, True, False, 50),
    ],
)
def test_classify_disconnect_table(first, reconnected, second, blocked, score):
    _, result = classify_disconnect(first, reconnected, second, blocked)
    assert result == score


def test_classify_disconnect_blocked_message():
    message, _ = classify_disconnect(True, False, False, True)
    assert message == "🚨 Server appears to be blocking our IP after connection"


def test_classify_disconnect_blocked_ignored_without_banner():
    assert classify_disconnect(False, False, False, True) == ("❌ Reconnection failed", 0)


@pytest.mark.parametrize(
    "handler, score",
    [(_banner, 10), (_silent, 40), (_late_banner, 50)],
)
def test_check_disconnect_against_server(handler, score):
    with _serve(handler) as target:
        _, result = check_disconnect(target, 0)
    assert result == score


def test_check_disconnect_normal_message():
    with _serve(_banner) as target:
        message, _ = check_disconnect(target, 0)
    assert message.startswith("✅ Normal behavior")


def test_check_disconnect_initial_failure():
    assert check_disconnect(_refused(), 0) == ("❌ Initial connection failed", 0)


@mock.patch("time.sleep")
def test_check_disconnect_detects_block(sleeper):
    with _serve(_banner, limit=1) as target:
        message, score = check_disconnect(target, 0)
    assert score == 90
    assert message.startswith("🚨 Server appears to be blocking")
    sleeper.assert_any_call(5)


@mock.patch("time.sleep")
def test_check_temp_block_reachable_server(sleeper):
    with _serve(_banner) as target:
        assert check_temp_block(target) is False
    assert sleeper.call_count == 1


@mock.patch("time.sleep")
def test_check_temp_block_unreachable_server(sleeper):
    assert check_temp_block(_refused()) is True
    assert [c.args[0] for c in sleeper.call_args_list] == [1, 2, 3]