"""Custom exceptions and error handling utilities."""

import logging
from typing import Optional

import dns.exception
import dns.resolver
import sentry_sdk

from dnsolve.core.config import get_settings

logger = logging.getLogger(__name__)


class DNSolveError(Exception):
    """Base exception for dnsolve errors."""


class InvalidAddress(DNSolveError):
    """A server or IP address string could not be parsed."""


class ResolverCreationError(DNSolveError):
    """A resolver instance could not be built."""


class BufferReleasedError(DNSolveError):
    """A result buffer was used or released after it had been released."""


# Expected DNS errors that shouldn't be reported to Sentry
EXPECTED_DNS_ERRORS = (
    dns.resolver.NoAnswer,
    dns.resolver.NXDOMAIN,
    dns.resolver.NoNameservers,
    dns.exception.Timeout,
)


def capture_exception(
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "error",
) -> None:
    """
    Log an exception with its traceback and forward it to Sentry.

    Args:
        exception: The exception to capture
        context: Extra key/value pairs attached to the log line and the event
        level: Log and Sentry level ('error', 'warning', 'info')
    """
    log_func = getattr(logger, level, logger.error)
    log_func(
        "%s: %s %s",
        type(exception).__name__,
        exception,
        context or {},
        exc_info=exception,
    )

    if not get_settings().use_sentry:
        return

    with sentry_sdk.push_scope() as scope:
        scope.set_level(level)
        for key, value in (context or {}).items():
            scope.set_extra(key, value)
        sentry_sdk.capture_exception(exception)


def is_expected_dns_error(exception: Exception) -> bool:
    """Check if exception is an expected DNS error (NXDOMAIN, NoAnswer, Timeout...)."""
    return isinstance(exception, EXPECTED_DNS_ERRORS)
