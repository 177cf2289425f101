"""Pytest configuration and fixtures."""

# pylint: disable=redefined-outer-name

import os
from dataclasses import dataclass, field
from typing import Optional

import pytest

from dnsolve.core.config import Settings
from dnsolve.core.executor import QueryExecutor, reset_executor
from dnsolve.core.statistics import QueryStatistics, reset_statistics
from dnsolve.dns.records import ResolvedRecord

# Keep test runs away from the real hosts file and Sentry
os.environ.setdefault("HOSTS_FILE", "/nonexistent/dnsolve-test-hosts")
os.environ.setdefault("SENTRY_DSN", "")


# --- Fake DNS Resolver ---


@dataclass
class FakeDNSResolver:
    """Fake resolver handle with predefined answers."""

    # Map (name, record_type) -> records
    records: dict[tuple[str, int], list[ResolvedRecord]] = field(default_factory=dict)
    # Map IP string -> PTR names
    ptr_names: dict[str, list[str]] = field(default_factory=dict)
    # Raised by every lookup when set
    error: Optional[Exception] = None
    calls: list[tuple] = field(default_factory=list)

    async def lookup(self, name: str, record_type: int) -> list[ResolvedRecord]:
        self.calls.append(("lookup", name, record_type))
        if self.error is not None:
            raise self.error
        return list(self.records.get((name, record_type), []))

    async def reverse_lookup(self, address) -> list[str]:
        self.calls.append(("reverse_lookup", str(address)))
        if self.error is not None:
            raise self.error
        return list(self.ptr_names.get(str(address), []))


@dataclass
class FakeResolverFactory:
    """Records how resolvers were requested and hands out the fake."""

    resolver: FakeDNSResolver = field(default_factory=FakeDNSResolver)
    error: Optional[Exception] = None
    calls: list[tuple[Optional[str], bool]] = field(default_factory=list)

    def __call__(self, server: Optional[str], dnssec: bool) -> FakeDNSResolver:
        self.calls.append((server, dnssec))
        if self.error is not None:
            raise self.error
        return self.resolver


# --- Fixtures ---


@pytest.fixture
def test_settings():
    """Create test settings without reading from env."""
    return Settings(
        hosts_file="/nonexistent/dnsolve-test-hosts",
        sentry_dsn=None,
        _env_file=None,
    )


@pytest.fixture
def fake_resolver():
    """Create a fake DNS resolver."""
    return FakeDNSResolver()


@pytest.fixture
def fake_factory(fake_resolver):
    """Create a resolver factory returning the fake resolver."""
    return FakeResolverFactory(resolver=fake_resolver)


@pytest.fixture
def test_statistics():
    """Fresh statistics for each test."""
    return QueryStatistics()


@pytest.fixture
def executor(test_settings, fake_factory, test_statistics):
    """Create a query executor wired to the fakes."""
    return QueryExecutor(
        settings=test_settings,
        resolver_factory=fake_factory,
        statistics=test_statistics,
    )


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset module-level defaults before and after each test."""
    reset_executor()
    reset_statistics()
    yield
    reset_executor()
    reset_statistics()
