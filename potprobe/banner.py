"""Grade an SSH server by the identification banner it sends."""

from __future__ import annotations

import re
import socket
import time

from potprobe.probe import _connect, _decode, _set_deadline

_KNOWN_HONEYPOT_BANNERS = (
    "SSH-2.0-Cowrie",
    "SSH-2.0-OpenSSH_7.6p1 Ubuntu-4ubuntu0.3",
    "SSH-2.0-OpenSSH_7.2p2 Ubuntu-4ubuntu2.8",
    "SSH-2.0-OpenSSH_6.7p1 Debian-5+deb8u8",
    "SSH-2.0-OpenSSH_8.2p1 Ubuntu-4ubuntu0.3",
    "SSH-2.0-OpenSSH_5.3p1 Debian-3ubuntu7.1",
    "SSH-2.0-OpenSSH_7.4p1 Debian-10+deb9u7",
    "SSH-2.0-OpenSSH_7.9p1 Debian-10+deb10u2",
    "SSH-2.0-OpenSSH_4.7p1 Debian-8ubuntu1.2",
    "SSH-2.0-OpenSSH_5.1p1 Debian-5",
    "SSH-2.0-OpenSSH_5.5p1 Debian-6+squeeze3",
    "SSH-2.0-OpenSSH_5.9p1 Debian-5ubuntu1.4",
    "SSH-2.0-libssh-0.1",
    "SSH-2.0-dropbear",
    "SSH-2.0-HonSSH",
    "SSH-2.0-HoneyPy",
    "SSH-2.0-sshd-honeypot",
    "SSH-2.0-Honeyd",
    "SSH-2.0-ModenaSSH",
    "SSH-2.0-ParanoidSSH",
    "SSH-2.0-SSH-Honeypot",
    "SSH-2.0-OpenSSH_3.9p1",
    "SSH-2.0-OpenSSH_4.3p2",
    "SSH-2.0-OpenSSH_6.0p1",
    "SSH-2.0-WinSSHD",
    "SSH-2.0-SSHield",
    "SSH-2.0-SSH_Server",
    "SSH-2.0-Unknown",
    "SSH-2.0-Test",
    "SSH-2.0-MockSSH",
    "SSH-2.0-FakeSSH",
    "SSH-2.0-DummySSH",
    "SSH-2.0-HoneypotSSH",
)

_OPENSSH_VERSION = re.compile(r"OpenSSH[_\-](\d+)", re.ASCII)
_SUSPICIOUS_PATTERNS = ("test", "mock", "fake", "dummy", "honeypot", "unknown")

_CONNECT_TIMEOUT = 4.0
_READ_TIMEOUT = 2.0


def classify_banner(banner: str) -> tuple[str, float]:
    """Return a verdict and a honeypot score for an SSH banner line."""
    banner = banner.strip()
    if any(known in banner for known in _KNOWN_HONEYPOT_BANNERS):
        return f"🚨 Honeypot detected (known signature): {banner}", 95.0

    if "OpenSSH" in banner:
        match = _OPENSSH_VERSION.search(banner)
        if match:
            version = int(match.group(1))
            if version < 5:
                return f"⚠️ Suspicious banner (very old OpenSSH v{version}): {banner}", 80.0
            if version < 7:
                return f"⚠️ Outdated OpenSSH version (v{version}): {banner}", 60.0
            if version < 8:
                return f"📜 OpenSSH v{version} (slightly outdated): {banner}", 30.0

    lowered = banner.lower()
    for pattern in _SUSPICIOUS_PATTERNS:
        if pattern in lowered:
            return f"⚠️ Suspicious banner pattern detected ({pattern}): {banner}", 70.0

    if not banner.startswith(("SSH-2.0-", "SSH-1.99-")):
        return f"⚠️ Non-standard SSH banner: {banner}", 50.0

    return f"📜 SSH Banner (no clear honeypot indicators): {banner}", 10.0


def _read_line(sock: socket.socket, deadline: float) -> bytes:
    """Read up to and including the first newline; a close before it is an error."""
    data = b""
    while b"\n" not in data:
        _set_deadline(sock, deadline)
        chunk = sock.recv(1024)
        if not chunk:
            raise ConnectionError("EOF")
        data += chunk
    return data[: data.index(b"\n") + 1]


def check_banner(target: str) -> tuple[str, float]:
    """Connect to ``target``, read its banner and grade it."""
    try:
        sock = _connect(target, _CONNECT_TIMEOUT)
    except OSError as exc:
        return f"❌ Connection failed: {exc}", 0.0
    with sock:
        try:
            line = _read_line(sock, time.monotonic() + _READ_TIMEOUT)
        except OSError as exc:
            return f"❌ Failed to read banner: {exc}", 0.0
    return classify_banner(_decode(line))