"""Mapping of resolver errors onto DNS response-status codes."""

from enum import IntEnum
from typing import Optional

import dns.message
import dns.rcode
import dns.resolver


class ResponseStatus(IntEnum):
    """Response status values reported in the "Status" field."""

    NOERROR = 0
    FORMERR = 1
    SERVFAIL = 2
    NXDOMAIN = 3
    NOTIMP = 4
    REFUSED = 5


# Embedded response codes that are surfaced as-is
_RCODE_STATUS = {
    dns.rcode.FORMERR: ResponseStatus.FORMERR,
    dns.rcode.SERVFAIL: ResponseStatus.SERVFAIL,
    dns.rcode.NXDOMAIN: ResponseStatus.NXDOMAIN,
    dns.rcode.NOTIMP: ResponseStatus.NOTIMP,
    dns.rcode.REFUSED: ResponseStatus.REFUSED,
}


def embedded_rcode(error: Exception) -> Optional[int]:
    """
    Return the response code a nameserver answered with, if the error carries one.

    NXDOMAIN, NoAnswer and YXDOMAIN imply their code. NoNameservers keeps the
    per-server errors as (server, tcp, port, error, response) tuples; the most
    recent server response wins.
    """
    if isinstance(error, dns.resolver.NXDOMAIN):
        return dns.rcode.NXDOMAIN
    if isinstance(error, dns.resolver.NoAnswer):
        return dns.rcode.NOERROR
    if isinstance(error, dns.resolver.YXDOMAIN):
        return dns.rcode.YXDOMAIN
    if not isinstance(error, dns.resolver.NoNameservers):
        return None

    for entry in reversed(error.kwargs.get("errors") or []):
        response = entry[4] if len(entry) > 4 else None
        if isinstance(response, dns.message.Message):
            return response.rcode()

        reason = entry[3] if len(entry) > 3 else None
        if isinstance(reason, str):
            try:
                return dns.rcode.from_text(reason)
            except dns.rcode.UnknownRcode:
                continue

    return None


def classify_error(error: Exception) -> ResponseStatus:
    """
    Map a failed forward query onto a response status.

    Errors without an embedded response code (timeouts, transport failures,
    bad names) are SERVFAIL. An embedded code outside the explicit table maps
    to NOERROR: clients read "Status 0 with no Answer" as "no records".
    """
    rcode = embedded_rcode(error)

    if rcode is None:
        return ResponseStatus.SERVFAIL

    return _RCODE_STATUS.get(rcode, ResponseStatus.NOERROR)


def classify_reverse_error(error: Exception) -> ResponseStatus:
    """Map a failed reverse lookup: NXDOMAIN stays NXDOMAIN, anything else is SERVFAIL."""
    if embedded_rcode(error) == dns.rcode.NXDOMAIN:
        return ResponseStatus.NXDOMAIN

    return ResponseStatus.SERVFAIL
