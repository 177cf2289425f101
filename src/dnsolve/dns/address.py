"""Parsing of nameserver address strings."""

import ipaddress
from dataclasses import dataclass
from typing import Union

from dnsolve.utils.exceptions import InvalidAddress

DEFAULT_PORT = 53

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass(frozen=True)
class Endpoint:
    """A nameserver endpoint."""

    ip: IPAddress
    port: int = DEFAULT_PORT

    def __str__(self) -> str:
        if self.ip.version == 6:
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"


def _parse_port(text: str, server: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise InvalidAddress(f"Invalid DNS server address: {server}")

    port = int(text)

    if port > 0xFFFF:
        raise InvalidAddress(f"Invalid DNS server address: {server}")

    return port


def parse_server_address(server: str) -> Endpoint:
    """
    Parse a nameserver address into an Endpoint.

    Accepts "1.1.1.1", "1.1.1.1:53", "::1" and "[::1]:53".
    Port defaults to 53.
    """
    text = server.strip()

    # Bare IPv4 or IPv6 literal
    try:
        return Endpoint(ipaddress.ip_address(text))
    except ValueError:
        pass

    if text.startswith("["):
        host, sep, port = text[1:].partition("]:")
        if not sep:
            raise InvalidAddress(f"Invalid DNS server address: {server}")
        try:
            ip = ipaddress.IPv6Address(host)
        except ValueError as e:
            raise InvalidAddress(f"Invalid DNS server address: {server}") from e
        return Endpoint(ip, _parse_port(port, server))

    host, sep, port = text.rpartition(":")

    if not sep:
        raise InvalidAddress(f"Invalid DNS server address: {server}")

    try:
        ip = ipaddress.IPv4Address(host)
    except ValueError as e:
        raise InvalidAddress(f"Invalid DNS server address: {server}") from e

    return Endpoint(ip, _parse_port(port, server))
