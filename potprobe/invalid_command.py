"""Send a malformed SSH preamble and look for honeypot tells in the reply."""

from __future__ import annotations

import random
import secrets
import time

from potprobe.probe import _connect, _decode, _receive, _set_deadline, random_delay

_COMMANDS = (
    b"SSH-1.99-INVALID\x00\x00\x00\x02\x0a",
    b"\x00\x00\x00\x14\x06INVALID\x00\x00\x00\x00",
    b"SSH-2.0-CUSTOM\x01\x02\x03\x04",
)

_INDICATORS = (
    ("cowrie", 95),
    ("kippo", 95),
    ("honssh", 90),
    ("honeypot", 85),
    ("invalid protocol", 70),
    ("unrecognized", 60),
)

_SESSION_TIMEOUT = 5.0


def analyze_invalid_command_response(response: str) -> tuple[str, float]:
    """Grade a server's reply to a malformed command."""
    response = response.strip()
    if not response:
        return "✅ No response (normal)", 10.0
    lowered = response.lower()
    hits = [(pattern, confidence) for pattern, confidence in _INDICATORS if pattern in lowered]
    if hits:
        detected = ", ".join(pattern for pattern, _ in hits)
        confidence = max(confidence for _, confidence in hits)
        return f"🚨 Detected patterns ({detected}): {response}", float(confidence)
    return f"⚠️ Unexpected response: {response}", 40.0


def check_invalid_command(target: str) -> tuple[str, float]:
    """Send one randomly chosen malformed command to ``target`` and grade the reply."""
    time.sleep(random_delay(500, 3000))

    try:
        sock = _connect(target, random.randint(3, 6))
    except OSError as exc:
        return f"❌ Connection error: {exc}", 0.0

    command = secrets.choice(_COMMANDS)
    with sock:
        expires = time.monotonic() + _SESSION_TIMEOUT
        _set_deadline(sock, expires)
        try:
            sock.sendall(command)
        except OSError as exc:
            return f"❌ Write error: {exc}", 0.0

        _set_deadline(sock, expires)
        try:
            reply = _receive(sock, 1024)
        except TimeoutError:
            return "✅ Timeout (normal behavior)", 10.0
        except OSError as exc:
            return f"✅ Connection closed (normal): {exc}", 10.0

    return analyze_invalid_command_response(_decode(reply))