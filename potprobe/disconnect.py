"""Watch how a server behaves when a client drops and comes back."""

from __future__ import annotations

import random
import time

from potprobe.probe import _connect, random_delay

_READ_TIMEOUT = 3.0
_BLOCK_RECHECK_PAUSE = 5


def classify_disconnect(
    first_banner: bool,
    reconnected: bool,
    second_banner: bool,
    blocked: bool,
) -> tuple[str, float]:
    """Grade what was seen over a disconnect and reconnect."""
    if not reconnected:
        if first_banner:
            if blocked:
                return "🚨 Server appears to be blocking our IP after connection", 90.0
            return "🚨 Server stopped responding after disconnection (honeypot behavior)", 85.0
        return "❌ Reconnection failed", 0.0
    if not second_banner:
        if first_banner:
            return "⚠️ Reconnected but no banner received (suspicious)", 60.0
        return "⚠️ Reconnected but no banner received in both attempts", 40.0
    if first_banner:
        return "✅ Normal behavior: successful reconnection with banner", 10.0
    return "⚠️ Banner received only on reconnection (unusual)", 50.0


def check_temp_block(target: str) -> bool:
    """Return True if three spaced connection attempts to ``target`` all fail."""
    for attempt in range(3):
        time.sleep(1 + attempt)
        try:
            conn = _connect(target, 3.0)
        except OSError:
            continue
        conn.close()
        return False
    return True


def _got_banner(conn) -> bool:
    conn.settimeout(_READ_TIMEOUT)
    try:
        return bool(conn.recv(512))
    except OSError:
        return False


def check_disconnect(target: str, reconnect_delay: float | None = None) -> tuple[str, float]:
    """Connect, drop, wait ``reconnect_delay`` seconds (random if None) and reconnect."""
    if reconnect_delay is None:
        reconnect_delay = random_delay(2000, 8000)

    try:
        first = _connect(target, random.randint(3, 5))
    except OSError:
        return "❌ Initial connection failed", 0.0
    with first:
        has_banner = _got_banner(first)

    time.sleep(reconnect_delay)

    try:
        second = _connect(target, random.randint(3, 5))
    except OSError:
        blocked = False
        if has_banner:
            time.sleep(_BLOCK_RECHECK_PAUSE)
            blocked = check_temp_block(target)
        return classify_disconnect(has_banner, False, False, blocked)
    with second:
        second_banner = _got_banner(second)
    return classify_disconnect(has_banner, True, second_banner, False)