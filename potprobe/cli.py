"""Command line entry point: ask for a target, probe it and print the verdict."""

from __future__ import annotations

import argparse
import ipaddress
import socket

from potprobe.checks import run_checks
from potprobe.probe import _connect
from potprobe.scoring import calculate_overall_probability, print_report, to_result

_ART = r"""
               __ ___.                   __                
______   _____/  |\_ |__  __ __  _______/  |_  ___________ 
\____ \ /  _ \   __\ __ \|  |  \/  ___/\   __\/ __ \_  __ \
|  |_> >  <_> )  | | \_\ \  |  /\___ \  |  | \  ___/|  | \/
|   __/ \____/|__| |___  /____//____  > |__|  \___  >__|   
|__|                   \/           \/            \/       
	"""

_DEFAULT_PORT = "22"
_MAX_PORT = 65535
_FORMAT_MESSAGE = "Invalid adress format. Use: [host:port]"
_AVAILABILITY_TIMEOUT = 3.0


class AddressError(ValueError):
    """Raised when a target address cannot be used."""


def _split_host_port(address: str) -> tuple[str, str]:
    if address.startswith("["):
        end = address.find("]")
        if end < 0 or address[end + 1 : end + 2] != ":":
            raise AddressError(_FORMAT_MESSAGE)
        host, port = address[1:end], address[end + 2 :]
        if ":" in port:
            raise AddressError(_FORMAT_MESSAGE)
    else:
        host, _, port = address.rpartition(":")
        if ":" in host:
            raise AddressError(_FORMAT_MESSAGE)
    if any(bracket in host or bracket in port for bracket in "[]"):
        raise AddressError(_FORMAT_MESSAGE)
    return host, port


def _check_host(host: str) -> None:
    try:
        ipaddress.ip_address(host)
        return
    except ValueError:
        pass
    if not host:
        raise AddressError(f"cannot resolve adress {host}: no such host")
    try:
        socket.getaddrinfo(host, None)
    except OSError as exc:
        raise AddressError(f"cannot resolve adress {host}: {exc}") from exc


def _check_port(port: str) -> None:
    if not port:
        return
    if port.isascii() and port.isdigit():
        if int(port) > _MAX_PORT:
            raise AddressError(f"invalid port {port}: invalid port")
        return
    try:
        socket.getservbyname(port, "tcp")
    except OSError as exc:
        raise AddressError(f"invalid port {port}: {exc}") from exc


def validate_address(text: str) -> str:
    """Normalise ``host[:port]`` (port 22 by default) and check it can be used."""
    address = text.strip()
    if not address:
        raise AddressError("IP cant be blank")
    if ":" not in address:
        address += ":" + _DEFAULT_PORT
    host, port = _split_host_port(address)
    _check_host(host)
    _check_port(port)
    return address


def check_server_availability(address: str) -> bool:
    """Report whether a TCP connection to ``address`` can be opened."""
    print(f"\nChecking accesibly {address}...")
    try:
        conn = _connect(address, _AVAILABILITY_TIMEOUT)
    except OSError as exc:
        print(f"Server not accessable: {exc}")
        return False
    conn.close()
    print("Server validated , started check...\n")
    return True


def _read_target() -> str | None:
    try:
        line = input("\nServer IP [host:port]: ")
    except EOFError:
        print("error reading out: EOF")
        return None
    tokens = line.split()
    if not tokens:
        print("error reading out: unexpected newline")
        return None
    if len(tokens) > 1:
        print("error reading out: expected newline")
        return None
    return tokens[0]


def main(argv: list[str] | None = None) -> int:
    """Probe one SSH server for honeypot traits and print a report."""
    parser = argparse.ArgumentParser(
        prog="potprobe", description="Estimate how likely an SSH server is a honeypot."
    )
    parser.add_argument("address", nargs="?", help="target as host[:port]; asked for if omitted")
    args = parser.parse_args(argv)

    print(_ART)
    text = args.address if args.address is not None else _read_target()
    if text is None:
        return 1
    try:
        address = validate_address(text)
    except AddressError as exc:
        print(exc)
        return 1
    if not check_server_availability(address):
        return 1

    results = [to_result(check) for check in run_checks(address)]
    print_report(results, calculate_overall_probability(results))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())