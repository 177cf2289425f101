"""Decorators for error handling and monitoring."""

import asyncio
import functools
from typing import Callable, TypeVar

import sentry_sdk

from dnsolve.core.config import get_settings
from dnsolve.utils.exceptions import capture_exception

F = TypeVar("F", bound=Callable)


def sentry_exception_catcher(func: F) -> F:
    """
    Report any exception escaping func, then re-raise it.

    Handles plain and coroutine functions. The qualified name of func is
    attached as the "operation" context so Sentry events can be grouped
    by entry point.
    """
    context = {"operation": func.__qualname__}

    if asyncio.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                capture_exception(e, context)
                raise

        return async_wrapper  # type: ignore

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            capture_exception(e, context)
            raise

    return sync_wrapper  # type: ignore


def init_sentry() -> bool:
    """Initialize the Sentry SDK when SENTRY_DSN is set. Returns True if enabled."""
    settings = get_settings()

    if not settings.use_sentry:
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        send_default_pii=False,
    )

    return True
