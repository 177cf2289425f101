"""Reverse-lookup (PTR) query names."""

import ipaddress
from typing import Union

IPV4_REVERSE_SUFFIX = "in-addr.arpa."
IPV6_REVERSE_SUFFIX = "ip6.arpa."


def reverse_name(
    address: Union[str, ipaddress.IPv4Address, ipaddress.IPv6Address],
) -> str:
    """
    Build the canonical reverse-lookup name for an IP address.

    192.0.2.5 -> "5.2.0.192.in-addr.arpa."
    ::1       -> "1.0.0. ... .0.ip6.arpa." (32 nibbles, least significant first)
    """
    ip = ipaddress.ip_address(address)
    packed = ip.packed

    if ip.version == 4:
        labels = [str(octet) for octet in reversed(packed)]
        return ".".join(labels) + "." + IPV4_REVERSE_SUFFIX

    nibbles: list[str] = []

    for byte in reversed(packed):
        nibbles.append(f"{byte & 0x0F:x}")
        nibbles.append(f"{byte >> 4:x}")

    return ".".join(nibbles) + "." + IPV6_REVERSE_SUFFIX
