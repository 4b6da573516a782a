"""Send a bogus 'help' packet after the SSH header and grade the reply."""

from __future__ import annotations

import random
import socket
import time

from potprobe.probe import _connect, _decode, _receive, _set_deadline, random_delay, truncate

_CLIENT_HEADER = b"SSH-2.0-9.53b\r\n"
_HELP_COMMAND = b"\x00\x00\x00\x04\x0ahelp"
_SESSION_TIMEOUT = 5.0

_PATTERNS = (
    ("cowrie", 99, "☣️ Cowrie honeypot detected"),
    ("kippo", 99, "☣️ Kippo honeypot detected"),
    ("honeypot", 95, "☣️ Generic honeypot detected"),
    ("available commands", 90, "⚠️ Suspicious: Available commands list"),
    ("help", 80, "⚠️ Suspicious: Help response"),
    ("invalid", 60, "⚠️ Unexpected: Invalid command response"),
)

_NO_RESPONSE = ("✅ Normal: No response to 'help'", 10.0)


def analyze_help_response(response: str) -> tuple[str, float]:
    """Grade the text a server sent back after the 'help' packet."""
    response = response.strip()
    lowered = response.lower()
    for pattern, confidence, message in _PATTERNS:
        if pattern in lowered:
            return f"{message}: {response}", float(confidence)
    if len(response) > 200:
        return f"⚠️ Suspiciously long response: {truncate(response, 100)}", 85.0
    if response:
        return f"⚠️ Unexpected response: {response}", 50.0
    return _NO_RESPONSE


def _transmit(sock: socket.socket, deadline: float, payload: bytes) -> None:
    _set_deadline(sock, deadline)
    sock.sendall(payload)


def check_help(target: str) -> tuple[str, float]:
    """Probe ``target`` with an SSH header followed by a 'help' packet."""
    time.sleep(random_delay(1000, 5000))

    try:
        sock = _connect(target, random.randint(3, 6))
    except OSError as exc:
        return f"❌ Connection error: {exc}", 0.0

    with sock:
        deadline = time.monotonic() + _SESSION_TIMEOUT
        try:
            _transmit(sock, deadline, _CLIENT_HEADER)
        except OSError as exc:
            return f"❌ Failed to send client header: {exc}", 0.0

        time.sleep(random_delay(200, 1000))

        try:
            _transmit(sock, deadline, _HELP_COMMAND)
        except OSError as exc:
            return f"❌ Failed to send help command: {exc}", 0.0

        _set_deadline(sock, deadline)
        try:
            data = _receive(sock, 1024)
        except TimeoutError:
            return _NO_RESPONSE
        except OSError as exc:
            return f"✅ Connection closed (normal): {exc}", 10.0

    return analyze_help_response(_decode(data))