"""Forward and reverse query orchestration."""

import functools
import ipaddress
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Optional

import dns.rdatatype

from dnsolve.core.config import Settings, get_settings
from dnsolve.core.response import ResponseAssembler
from dnsolve.core.statistics import QueryStatistics, get_statistics
from dnsolve.dns.resolver import DNSResolver, ResolverFactory, create_resolver
from dnsolve.dns.reverse import reverse_name
from dnsolve.dns.serializer import record_data_to_text
from dnsolve.dns.status import ResponseStatus, classify_error, classify_reverse_error
from dnsolve.utils.exceptions import (
    ResolverCreationError,
    capture_exception,
    is_expected_dns_error,
)

logger = logging.getLogger(__name__)

PTR = int(dns.rdatatype.PTR)
MAX_RECORD_TYPE = 0xFFFF


def as_text(value: Any) -> Optional[str]:
    """
    Return value as a str if it is valid text, else None.

    bytes are decoded as UTF-8; str values must be encodable as UTF-8
    (no lone surrogates).
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            return None
        return value

    return None


def _is_record_type(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= MAX_RECORD_TYPE
    )


def _describe(error: Exception) -> str:
    return str(error) or type(error).__name__


@dataclass
class QueryExecutor:
    """Runs one query against a freshly built resolver and assembles the response."""

    settings: Settings = field(default_factory=get_settings)
    resolver_factory: Optional[ResolverFactory] = None
    statistics: QueryStatistics = field(default_factory=get_statistics)

    def __post_init__(self):
        if self.resolver_factory is None:
            self.resolver_factory = functools.partial(
                create_resolver, settings=self.settings
            )

    def _build_resolver(
        self, server: Any, dnssec: bool
    ) -> tuple[Optional[DNSResolver], Optional[dict]]:
        """Return (resolver, None) or (None, error response)."""
        server_text = None

        if server is not None:
            server_text = as_text(server)
            if server_text is None:
                return None, ResponseAssembler.error(
                    ResponseStatus.FORMERR, "Invalid UTF-8 in DNS server address"
                )

        try:
            return self.resolver_factory(server_text, dnssec), None
        except ResolverCreationError as e:
            logger.warning("Failed to create resolver for %r: %s", server_text, e)
            return None, ResponseAssembler.error(
                ResponseStatus.SERVFAIL, f"Failed to create resolver: {e}"
            )

    def _record(self, started: float, response: dict) -> None:
        elapsed_ms = (time.perf_counter() - started) * 1000
        self.statistics.record_query(elapsed_ms, response["Status"] == 0)

    async def resolve(
        self,
        domain: Any,
        record_type: Any,
        server: Any = None,
        dnssec: bool = False,
    ) -> dict:
        """
        Resolve (domain, record_type) and return the response document.

        Never raises: every failure becomes a response with a status and,
        for non-zero statuses, a comment.
        """
        started = time.perf_counter()
        response = await self._resolve(domain, record_type, server, bool(dnssec))
        self._record(started, response)

        logger.debug(
            "resolve %r type=%r server=%r -> %s",
            domain,
            record_type,
            server,
            response["Status"],
        )

        return response

    async def _resolve(
        self, domain: Any, record_type: Any, server: Any, dnssec: bool
    ) -> dict:
        name = as_text(domain)

        if name is None:
            return ResponseAssembler.error(
                ResponseStatus.FORMERR, "Invalid UTF-8 in domain name"
            )

        if not _is_record_type(record_type):
            return ResponseAssembler.error(
                ResponseStatus.FORMERR, f"Invalid record type: {record_type!r}"
            )

        resolver, error = self._build_resolver(server, dnssec)

        if resolver is None:
            return error

        assembler = ResponseAssembler(authenticated_data=dnssec)
        assembler.add_question(name, record_type)

        try:
            records = await resolver.lookup(name, record_type)
        except Exception as e:  # pylint: disable=broad-exception-caught
            if is_expected_dns_error(e):
                logger.debug("Lookup %s/%s failed: %s", name, record_type, e)
            else:
                capture_exception(
                    e, {"domain": name, "record_type": record_type}, level="warning"
                )

            # Nothing was authenticated on a failed lookup
            assembler.authenticated_data = False
            assembler.status = classify_error(e)
            assembler.comment = _describe(e)

            return assembler.build()

        for record in records:
            assembler.add_answer(
                record.owner_name,
                record.record_type,
                record.ttl,
                record_data_to_text(record.data),
            )

        return assembler.build()

    async def reverse_lookup(self, ip: Any, server: Any = None) -> dict:
        """Look up the PTR names of ip and return the response document."""
        started = time.perf_counter()
        response = await self._reverse_lookup(ip, server)
        self._record(started, response)

        logger.debug("reverse %r server=%r -> %s", ip, server, response["Status"])

        return response

    async def _reverse_lookup(self, ip: Any, server: Any) -> dict:
        ip_text = as_text(ip)

        if ip_text is None:
            return ResponseAssembler.error(
                ResponseStatus.FORMERR, "Invalid UTF-8 in IP address"
            )

        try:
            address = ipaddress.ip_address(ip_text)
            if getattr(address, "scope_id", None):
                raise ValueError("scoped IPv6 addresses have no reverse name")
        except ValueError as e:
            return ResponseAssembler.error(
                ResponseStatus.FORMERR, f"Invalid IP address '{ip_text}': {e}"
            )

        # Reverse lookups never request DNSSEC
        resolver, error = self._build_resolver(server, False)

        if resolver is None:
            return error

        ptr_name = reverse_name(address)

        assembler = ResponseAssembler(authenticated_data=False)
        assembler.add_question(ptr_name, PTR)

        try:
            names = await resolver.reverse_lookup(address)
        except Exception as e:  # pylint: disable=broad-exception-caught
            if is_expected_dns_error(e):
                logger.debug("Reverse lookup %s failed: %s", address, e)
            else:
                capture_exception(e, {"ip": ip_text}, level="warning")

            assembler.status = classify_reverse_error(e)
            assembler.comment = _describe(e)

            return assembler.build()

        # The reverse-lookup primitive doesn't expose per-record TTLs
        for target in names:
            assembler.add_answer(ptr_name, PTR, 0, target)

        return assembler.build()


# Default executor instance
_executor: Optional[QueryExecutor] = None


def get_executor() -> QueryExecutor:
    """Get or create the default query executor."""
    global _executor  # pylint: disable=global-statement

    if _executor is None:
        _executor = QueryExecutor()

    return _executor


def reset_executor() -> None:
    """Reset the default executor (useful for testing)."""
    global _executor  # pylint: disable=global-statement

    _executor = None
