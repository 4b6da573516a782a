"""Offer a 'none' style user-auth packet straight after the banners and grade the reply."""

from __future__ import annotations

import random
import secrets
import socket
import time

from potprobe.probe import _connect, _decode, _receive, _set_deadline

_CLIENT_BANNERS = (
    "SSH-2.0-OpenSSH_8.9p1",
    "SSH-2.0-PuTTY_Release_0.76",
    "SSH-2.0-libssh-0.9.5",
)

_USERNAMES = (
    "admin",
    "root",
    "test",
    "ubuntu",
    "user",
    "guest",
    "notgay",
    "minecraft",
    "henry",
    "piterparker",
    "simpson",
    "pitergriffin",
)

_INDICATORS = (
    (b"\x00\x00\x00\x34\x06", 95, "🚨 Honeypot: Full protocol exchange"),
    (b"cowrie", 99, "☣️ Cowrie honeypot detected"),
    (b"kippo", 99, "☣️ Kippo honeypot detected"),
    (b"invalid", 80, "⚠️ Unexpected: Invalid protocol response"),
    (b"service not available", 85, "⚠️ Suspicious: Service not available"),
)

_USERAUTH_REQUEST = 0x32
_SESSION_TIMEOUT = 6.0


def _secure_delay(min_ms: int, max_ms: int) -> float:
    return (min_ms + secrets.randbelow(max_ms - min_ms)) / 1000


def _format_elapsed(seconds: float) -> str:
    """Render a duration compactly, e.g. ``1.5ms`` or ``830µs``."""
    nanos = round(seconds * 1e9)
    if nanos == 0:
        return "0s"
    for scale, unit in ((1e9, "s"), (1e6, "ms"), (1e3, "µs")):
        if nanos >= scale:
            text = f"{nanos / scale:.9f}".rstrip("0").rstrip(".")
            return text + unit
    return f"{nanos}ns"


def random_username() -> str:
    """Pick a plausible login name for the probe."""
    return random.choice(_USERNAMES)


def build_userauth_packet(username: str) -> bytes:
    """Build the length-prefixed user-auth request carrying ``username``."""
    name = username.encode()
    body = bytes((_USERAUTH_REQUEST, 0, 0, 0, len(name) & 0xFF)) + name
    return len(body).to_bytes(4, "big") + body


def analyze_none_auth_response(
    response: bytes, server_banner: str, elapsed: float
) -> tuple[str, float]:
    """Grade the bytes a server sent back after the user-auth packet."""
    for pattern, confidence, message in _INDICATORS:
        if pattern in response:
            return f"{message} (response: {response.hex()})", float(confidence)
    if not response:
        return "✅ No response (normal)", 5.0
    took = _format_elapsed(elapsed)
    if response[0] == 0x05:
        return "⚠️ Accepted 'none' auth (very suspicious)", 90.0
    if response[0] == 0x02:
        return f"✅ Disconnect (normal). Banner: {server_banner}, Time: {took}", 10.0
    return (
        f"⚠️ Unexpected response: {response.hex()} (Banner: {server_banner}, Time: {took})",
        60.0,
    )


def _send_quietly(sock: socket.socket, deadline: float, data: bytes) -> None:
    try:
        _set_deadline(sock, deadline)
        sock.sendall(data)
    except OSError:
        pass


def check_none_auth(target: str) -> tuple[str, float]:
    """Exchange banners with ``target``, offer a user-auth packet and grade the reply."""
    time.sleep(_secure_delay(1000, 5000))

    try:
        sock = _connect(target, random.randint(3, 6))
    except OSError as exc:
        return f"❌ Connection failed: {exc}", 0.0

    with sock:
        deadline = time.monotonic() + _SESSION_TIMEOUT
        try:
            _set_deadline(sock, deadline)
            greeting = sock.recv(256)
        except OSError:
            greeting = b""
        if not greeting.startswith(b"SSH-"):
            return "❌ Invalid or no SSH banner received", 0.0
        server_banner = _decode(greeting).strip()

        _send_quietly(sock, deadline, (random.choice(_CLIENT_BANNERS) + "\r\n").encode())
        time.sleep(_secure_delay(200, 1000))
        _send_quietly(sock, deadline, build_userauth_packet(random_username()))

        start = time.perf_counter()
        try:
            _set_deadline(sock, deadline)
            response = _receive(sock, 1024)
        except TimeoutError:
            return "✅ Timeout (normal behavior)", 10.0
        except OSError as exc:
            return f"✅ Connection closed (normal): {exc}", 10.0
        elapsed = time.perf_counter() - start

    return analyze_none_auth_response(response, server_banner, elapsed)