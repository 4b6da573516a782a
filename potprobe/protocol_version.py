"""Offer a legacy SSH-1.99 client version and see whether the server plays along."""

from __future__ import annotations

import contextlib
import random
import time

from potprobe.probe import _connect, _decode, _receive, _set_deadline, random_delay

_CLIENT_VERSIONS = (
    "SSH-1.99-OpenSSH_7.4p1",
    "SSH-1.99-Next-1.02",
    "SSH-1.99-ProSSH_0.22",
)

_INDICATORS = (
    ("SSH-1.99", 100, "🚨 Accepts legacy version (Honeypot!)"),
    ("Protocol mismatch", 20, "✅ Normal: Protocol mismatch"),
    ("Invalid protocol", 20, "✅ Normal: Invalid protocol"),
    ("cowrie", 99, "☣️ Cowrie honeypot detected"),
    ("kippo", 99, "☣️ Kippo honeypot detected"),
)

_SESSION_TIMEOUT = 4.0


def analyze_protocol_response(response: str) -> tuple[str, float]:
    """Grade what the server sent after a legacy version string."""
    text = response.strip()
    for pattern, confidence, message in _INDICATORS:
        if pattern in text:
            return f"{message}: {text}", float(confidence)
    if "SSH-2.0" in text:
        return "✅ SSH-2.0 only (Normal)", 10.0
    if not response:
        return "✅ No response (Normal)", 10.0
    return f"⚠️ Unknown response: {text}", 30.0


def check_protocol_version(target: str) -> tuple[str, float]:
    """Send a random SSH-1.99 client version to ``target`` and grade the reply."""
    time.sleep(random_delay(1000, 3000))

    try:
        sock = _connect(target, random.randint(2, 4))
    except OSError as exc:
        return f"❌ Connection failed: {exc}", 0.0

    version_line = (random.choice(_CLIENT_VERSIONS) + "\r\n").encode()
    with sock:
        cutoff = time.monotonic() + _SESSION_TIMEOUT
        # A failed write is not fatal: the read below reports what happened.
        with contextlib.suppress(OSError):
            _set_deadline(sock, cutoff)
            sock.sendall(version_line)

        _set_deadline(sock, cutoff)
        try:
            answer = _receive(sock, 512)
        except TimeoutError:
            return "✅ Timeout (normal behavior)", 10.0
        except OSError as exc:
            return f"✅ Connection closed (normal): {exc}", 10.0

    return analyze_protocol_response(_decode(answer))