"""
Synchronous entry points for host applications.

Each call runs one query to completion on its own event loop and hands back
a ResultBuffer holding the JSON document. The buffer must be released exactly
once, with dns_free_string() or by using it as a context manager:

    with dns_resolve("example.com", 1) as result:
        payload = result.text
"""

import asyncio
import json
import threading
from typing import Any, Optional

from dnsolve.core.executor import QueryExecutor, get_executor
from dnsolve.utils.exceptions import BufferReleasedError


def to_json(response: dict) -> str:
    """Serialize a response document compactly."""
    return json.dumps(response, separators=(",", ":"), ensure_ascii=False)


class ResultBuffer:
    """The JSON text of one call; readable until released, releasable once."""

    __slots__ = ("_text", "_lock")

    def __init__(self, text: str):
        self._text: Optional[str] = text
        self._lock = threading.Lock()

    @property
    def released(self) -> bool:
        return self._text is None

    @property
    def text(self) -> str:
        text = self._text
        if text is None:
            raise BufferReleasedError("Result buffer has already been released")
        return text

    def json(self) -> dict:
        """Return the parsed response document."""
        return json.loads(self.text)

    def release(self) -> None:
        with self._lock:
            if self._text is None:
                raise BufferReleasedError("Result buffer released twice")
            self._text = None

    def __enter__(self) -> "ResultBuffer":
        return self

    def __exit__(self, *exc_info) -> None:
        if not self.released:
            self.release()

    def __repr__(self) -> str:
        state = "released" if self.released else f"{len(self._text)} chars"
        return f"<ResultBuffer {state}>"


def dns_resolve(
    domain: Any,
    record_type: Any,
    dns_server: Any = None,
    dnssec: bool = False,
    executor: Optional[QueryExecutor] = None,
) -> ResultBuffer:
    """
    Resolve domain for record_type (e.g. 1=A, 28=AAAA, 15=MX).

    dns_server is an optional "ip", "ip:port" or "[ipv6]:port" string; None
    uses the system resolver configuration. Blocks until the query completes.
    """
    if executor is None:
        executor = get_executor()

    response = asyncio.run(executor.resolve(domain, record_type, dns_server, dnssec))

    return ResultBuffer(to_json(response))


def dns_reverse_lookup(
    ip: Any,
    dns_server: Any = None,
    executor: Optional[QueryExecutor] = None,
) -> ResultBuffer:
    """Reverse-resolve an IPv4 or IPv6 address. Blocks until the query completes."""
    if executor is None:
        executor = get_executor()

    response = asyncio.run(executor.reverse_lookup(ip, dns_server))

    return ResultBuffer(to_json(response))


def dns_free_string(buffer: ResultBuffer) -> None:
    """
    Release a buffer returned by dns_resolve or dns_reverse_lookup.

    Call exactly once per buffer; a second call raises BufferReleasedError.
    """
    if not isinstance(buffer, ResultBuffer):
        raise TypeError(f"Expected ResultBuffer, got {type(buffer).__name__}")

    buffer.release()


def resolve(
    domain: Any,
    record_type: Any,
    dns_server: Any = None,
    dnssec: bool = False,
    executor: Optional[QueryExecutor] = None,
) -> dict:
    """Like dns_resolve, returning the parsed document."""
    with dns_resolve(domain, record_type, dns_server, dnssec, executor) as result:
        return result.json()


def reverse_lookup(
    ip: Any,
    dns_server: Any = None,
    executor: Optional[QueryExecutor] = None,
) -> dict:
    """Like dns_reverse_lookup, returning the parsed document."""
    with dns_reverse_lookup(ip, dns_server, executor) as result:
        return result.json()
