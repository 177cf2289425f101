"""Hosts-file lookups consulted before the network."""

import ipaddress
import logging
import pathlib
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


def _normalize(name: str) -> str:
    return name.strip().rstrip(".").lower()


@dataclass
class HostsFile:
    """
    Name <-> address mappings read from a hosts file.

    - Comments begin with '#', including inline comments.
    - Each line is an IP followed by one or more names.
    - Lines without a name or with an invalid IP are skipped.
    - Entries keep file order; duplicates are dropped.
    """

    by_name: dict[str, list[str]] = field(default_factory=dict)
    by_address: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def load(cls, path: str) -> "HostsFile":
        """Read a hosts file. A missing or unreadable file yields an empty mapping."""
        hosts = cls()
        hosts_path = pathlib.Path(path)

        try:
            content = hosts_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug("Hosts file %s not loaded: %s", hosts_path, e)
            return hosts

        hosts.parse(content)

        return hosts

    def parse(self, content: str) -> None:
        """Add the mappings found in hosts-file text."""
        for raw_line in content.splitlines():
            line = raw_line.split("#", 1)[0].strip()
            if not line:
                continue

            parts = line.split()
            if len(parts) < 2:
                logger.debug("Skipping malformed hosts line: %r", raw_line)
                continue

            try:
                ip = ipaddress.ip_address(parts[0].split("%", 1)[0])
            except ValueError:
                logger.debug("Skipping hosts line with invalid address: %r", raw_line)
                continue

            address = str(ip)

            for name in parts[1:]:
                key = _normalize(name)
                addresses = self.by_name.setdefault(key, [])
                if address not in addresses:
                    addresses.append(address)

                names = self.by_address.setdefault(address, [])
                fqdn = key + "."
                if fqdn not in names:
                    names.append(fqdn)

    def addresses(self, name: str, version: int) -> list[str]:
        """Return the addresses of one IP version mapped to name."""
        return [
            a
            for a in self.by_name.get(_normalize(name), [])
            if ipaddress.ip_address(a).version == version
        ]

    def names(self, address: str) -> list[str]:
        """Return the names mapped to address, fully qualified."""
        return list(self.by_address.get(str(ipaddress.ip_address(address)), []))
