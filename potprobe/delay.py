"""Grade a server by how long a TCP connection takes to establish."""

from __future__ import annotations

import time

from potprobe.probe import _connect

_CONNECT_TIMEOUT = 4.0


def measure_delay(target: str) -> float:
    """Return the connect time to ``target`` in milliseconds; raise OSError on failure."""
    start = time.perf_counter()
    with _connect(target, _CONNECT_TIMEOUT):
        elapsed = time.perf_counter() - start
    return int(elapsed * 1_000_000) / 1000


def classify_delay(delay_ms: float) -> tuple[str, float]:
    """Return a verdict and a honeypot score for a connect time in milliseconds."""
    if delay_ms > 1000:
        return f"🚨 HIGH delay: {delay_ms:.2f} ms (possible sandbox/honeypot)", 100.0
    if delay_ms > 700:
        return f"⚠️ Suspicious delay: {delay_ms:.2f} ms", 75.0
    if delay_ms > 500:
        return f"⚠️ Slightly high delay: {delay_ms:.2f} ms", 50.0
    if delay_ms > 250:
        return f"📶 Normal delay: {delay_ms:.2f} ms", 25.0
    return f"📶 Fast response: {delay_ms:.2f} ms", 10.0


def run_delay_check(target: str) -> tuple[str, float]:
    """Measure the connect time to ``target`` and grade it."""
    try:
        delay_ms = measure_delay(target)
    except OSError as exc:
        return f"❌ Connection error: {exc}", 0.0
    return classify_delay(delay_ms)