"""Shared pieces for the honeypot probes: results, timing and connections."""

from __future__ import annotations

import random
import socket
import time
from dataclasses import dataclass

_MAX_PORT = 65535


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one probe: its name, a readable verdict and a 0-100 score."""

    name: str
    details: str
    score: int


def random_delay(min_ms: int, max_ms: int) -> float:
    """Return a random pause in seconds, drawn from [min_ms, max_ms) milliseconds."""
    if max_ms <= min_ms:
        return min_ms / 1000
    return (min_ms + random.randrange(max_ms - min_ms)) / 1000


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def _split_target(target: str) -> tuple[str, int]:
    """Split ``host:port`` (or ``[v6]:port``) into a host and a numeric port."""
    if target.startswith("["):
        host, sep, port = target[1:].partition("]:")
        if not sep:
            raise OSError(f"address {target}: missing port in address")
    else:
        host, sep, port = target.rpartition(":")
        if not sep:
            raise OSError(f"address {target}: missing port in address")
        if ":" in host:
            raise OSError(f"address {target}: too many colons in address")
    if port.isdigit():
        number = int(port)
        if number > _MAX_PORT:
            raise OSError(f"address {target}: invalid port")
        return host, number
    return host, socket.getservbyname(port, "tcp")


def _connect(target: str, timeout: float) -> socket.socket:
    """Open a TCP connection to ``target`` within ``timeout`` seconds."""
    return socket.create_connection(_split_target(target), timeout=timeout)


def _set_deadline(sock: socket.socket, deadline: float) -> None:
    """Limit the next socket operation to the time left before ``deadline``."""
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        raise TimeoutError("i/o timeout")
    sock.settimeout(remaining)


def _receive(sock: socket.socket, size: int) -> bytes:
    """Read up to ``size`` bytes, raising on an orderly close by the peer."""
    data = sock.recv(size)
    if not data:
        raise ConnectionError("EOF")
    return data


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")