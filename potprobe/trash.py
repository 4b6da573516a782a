"""Throw junk payloads at a server and grade how it reacts."""

from __future__ import annotations

import random
import time

from potprobe.probe import _connect, _decode, _receive, _set_deadline

_TRASH_PAYLOADS = (
    b"SSH-2.0-INVALID\x00\x00\x00\x02\x0a",
    b"\x00\x00\x00\x14\x06INVALID\x00\x00\x00\x00",
    b"SSH-1.99-CUSTOM\x01\x02\x03\x04",
    b"SSH-3.0-HACKNET\r\n",
    b"HELP\r\n",
    b"LOGIN root toor\r\n",
    b"SSH-1.5-0p5\x01\x01\x01",
    b"\xde\xad\xbe\xef\x00\x00\x00\x01",
    b"\x00\x00\x00\x05\x15\x01\x02\x03\x04",
    b'{"version":"SSH-2.0","os":"Linux"}\r\n',
    b"SSH-2.0-" + b"G" * 1000,
)

_HONEYPOT_SIGNATURES = (
    "Cowrie",
    "HonSSH",
    "HoneyPy",
    "Kippo",
    "Dionaea",
    "Amun",
    "Glastopf",
    "Honeyd",
    "MHN",
    "T-Pot",
)

_SESSION_TIMEOUT = 5.0


def is_known_honeypot(banner: str) -> bool:
    """Return True if ``banner`` names a known honeypot product."""
    return any(signature in banner for signature in _HONEYPOT_SIGNATURES)


def analyze_response(resp: str, duration_ms: int) -> tuple[float, str]:
    """Score one reply to a junk payload; ``(0, "")`` means nothing notable."""
    lowered = resp.lower()
    if resp.startswith("SSH-2.0-"):
        if is_known_honeypot(resp):
            return 95.0, f"🚨 Known honeypot banner: {resp}"
        return 70.0, f"⚠️ Responded with SSH banner to junk: {resp}"
    if "protocol mismatch" in lowered:
        return 50.0, f"⚠️ Protocol mismatch: {resp}"
    if "invalid" in lowered or "error" in lowered:
        return 60.0, f"⚠️ Error-like response: {resp}"
    if not resp and duration_ms < 150:
        return 80.0, "🚨 Silent response with suspicious speed (<150ms)"
    if resp:
        return 65.0, f"⚠️ Unexpected response: {resp}"
    return 0.0, ""


def check_trash(target: str) -> tuple[str, float]:
    """Send every junk payload over one connection and report the worst reply."""
    time.sleep((500 + random.randrange(1500)) / 1000)

    try:
        sock = _connect(target, random.randint(3, 5))
    except OSError as exc:
        return f"❌ [{target}] Connection error: {exc}", 0.0

    highest = 0.0
    final_message = ""
    with sock:
        deadline = time.monotonic() + _SESSION_TIMEOUT
        for payload in _TRASH_PAYLOADS:
            start = time.perf_counter()
            try:
                _set_deadline(sock, deadline)
                sock.sendall(payload)
                _set_deadline(sock, deadline)
                data = _receive(sock, 1024)
            except OSError:
                continue
            duration_ms = int((time.perf_counter() - start) * 1000)
            score, message = analyze_response(_decode(data).strip(), duration_ms)
            if score > highest:
                highest, final_message = score, message

    if highest == 0:
        return f"✅ [{target}] No significant response (likely real SSH)", 10.0
    return f"🧪 [{target}] {final_message}", highest