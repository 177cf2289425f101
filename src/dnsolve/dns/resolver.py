"""DNS resolver construction and query primitives."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

import dns.asyncresolver
import dns.flags
import dns.name
import dns.rdatatype
import dns.resolver

from dnsolve.core.config import Settings, get_settings
from dnsolve.dns.address import IPAddress, parse_server_address
from dnsolve.dns.hosts import HostsFile
from dnsolve.dns.records import AAAAData, AData, ResolvedRecord, record_from_rdata
from dnsolve.utils.exceptions import InvalidAddress, ResolverCreationError

logger = logging.getLogger(__name__)


class DNSResolver(Protocol):
    """Protocol for the resolver handle used by the query executor."""

    async def lookup(self, name: str, record_type: int) -> list[ResolvedRecord]: ...

    async def reverse_lookup(self, address: IPAddress) -> list[str]: ...


# (server, dnssec) -> resolver handle
ResolverFactory = Callable[[Optional[str], bool], DNSResolver]


@dataclass
class DnspythonResolver:
    """Resolver handle backed by dnspython, consulting a hosts file first."""

    resolver: dns.asyncresolver.Resolver
    hosts: HostsFile = field(default_factory=HostsFile)
    hosts_ttl: int = 86400

    def _hosts_records(self, name: str, record_type: int) -> list[ResolvedRecord]:
        if record_type == dns.rdatatype.A:
            version, data_cls = 4, AData
        elif record_type == dns.rdatatype.AAAA:
            version, data_cls = 6, AAAAData
        else:
            return []

        owner = dns.name.from_text(name).to_text()

        return [
            ResolvedRecord(owner, record_type, self.hosts_ttl, data_cls(address))
            for address in self.hosts.addresses(name, version)
        ]

    async def lookup(self, name: str, record_type: int) -> list[ResolvedRecord]:
        """
        Resolve (name, record_type).

        Returns every record of the answer section in resolver order, CNAME
        chain included. Raises the resolver library's exceptions on failure.
        """
        records = self._hosts_records(name, record_type)

        if records:
            logger.debug("%s/%s answered from hosts file", name, record_type)
            return records

        answer = await self.resolver.resolve(name, record_type)

        for rrset in answer.response.answer:
            for rdata in rrset:
                records.append(record_from_rdata(rrset.name, rrset.ttl, rdata))

        return records

    async def reverse_lookup(self, address: IPAddress) -> list[str]:
        """Return the PTR targets for address, hosts file first."""
        names = self.hosts.names(str(address))

        if names:
            logger.debug("%s answered from hosts file", address)
            return names

        answer = await self.resolver.resolve_address(str(address))

        return [rdata.target.to_text() for rdata in answer]


def create_resolver(
    server: Optional[str] = None,
    dnssec: bool = False,
    settings: Optional[Settings] = None,
) -> DnspythonResolver:
    """
    Build a resolver handle.

    Without a server the system configuration is used. With a server, that
    single endpoint is the only nameserver (UDP, retried over TCP on
    truncation). DNSSEC sets the DO bit and asks for authenticated data.

    Raises ResolverCreationError if the server address doesn't parse or the
    system configuration can't be read.
    """
    if settings is None:
        settings = get_settings()

    try:
        if server is None:
            resolver = dns.asyncresolver.Resolver()
        else:
            endpoint = parse_server_address(server)
            resolver = dns.asyncresolver.Resolver(configure=False)
            # Port must be set before nameservers so it applies to them
            resolver.port = endpoint.port
            resolver.nameservers = [str(endpoint.ip)]
    except (InvalidAddress, dns.resolver.NoResolverConfiguration) as e:
        raise ResolverCreationError(str(e)) from e

    if dnssec:
        resolver.use_edns(0, dns.flags.DO, settings.edns_payload)
        resolver.flags = dns.flags.RD | dns.flags.AD

    if settings.resolver_timeout is not None:
        resolver.timeout = settings.resolver_timeout
    if settings.resolver_lifetime is not None:
        resolver.lifetime = settings.resolver_lifetime

    return DnspythonResolver(
        resolver=resolver,
        hosts=HostsFile.load(settings.hosts_file),
        hosts_ttl=settings.hosts_ttl,
    )
