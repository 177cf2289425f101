"""HTTP routes exposing resolve and reverse lookup."""

from dataclasses import dataclass, field
from typing import Optional

import dns.rdatatype
from fastapi import APIRouter, Depends

from dnsolve.api.models import DoHResponse
from dnsolve.core.executor import QueryExecutor, get_executor
from dnsolve.core.response import ResponseAssembler
from dnsolve.dns.status import ResponseStatus
from dnsolve.utils.decorators import sentry_exception_catcher

router = APIRouter()


@dataclass
class RouteDependencies:
    """Dependencies for route handlers."""

    executor: QueryExecutor = field(default_factory=get_executor)


# Global dependencies instance (can be overridden for testing)
_dependencies: Optional[RouteDependencies] = None


def get_dependencies() -> RouteDependencies:
    """Get the current route dependencies."""
    global _dependencies  # pylint: disable=global-statement
    if _dependencies is None:
        _dependencies = RouteDependencies()
    return _dependencies


def set_dependencies(deps: RouteDependencies) -> None:
    """Set custom dependencies (useful for testing)."""
    global _dependencies  # pylint: disable=global-statement
    _dependencies = deps


def reset_dependencies() -> None:
    """Reset dependencies to default (useful for testing)."""
    global _dependencies  # pylint: disable=global-statement
    _dependencies = None


def parse_record_type(value: str) -> Optional[int]:
    """Parse a record type given as a number ("15") or mnemonic ("MX")."""
    text = value.strip()

    if text.isdigit():
        return int(text)

    try:
        return int(dns.rdatatype.from_text(text.upper()))
    except dns.rdatatype.UnknownRdatatype:
        return None


@router.get(
    "/resolve",
    response_model=DoHResponse,
    response_model_exclude_none=True,
)
@sentry_exception_catcher
async def resolve(
    name: str,
    type: str = "A",  # pylint: disable=redefined-builtin
    server: Optional[str] = None,
    dnssec: bool = False,
    deps: RouteDependencies = Depends(get_dependencies),
):
    """Resolve name/type; failures are reported in the document, not the HTTP status."""
    record_type = parse_record_type(type)

    if record_type is None:
        return ResponseAssembler.error(
            ResponseStatus.FORMERR, f"Unknown record type: {type}"
        )

    return await deps.executor.resolve(name, record_type, server, dnssec)


@router.get(
    "/reverse",
    response_model=DoHResponse,
    response_model_exclude_none=True,
)
@sentry_exception_catcher
async def reverse(
    ip: str,
    server: Optional[str] = None,
    deps: RouteDependencies = Depends(get_dependencies),
):
    """Reverse-resolve an IPv4 or IPv6 address."""
    return await deps.executor.reverse_lookup(ip, server)
