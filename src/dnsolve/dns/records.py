"""Typed resource-record payloads and their conversion from dnspython rdata."""

from dataclasses import dataclass
from typing import Union

import dns.name
import dns.rdata
import dns.rdatatype


def _text(value: Union[bytes, str]) -> str:
    """Decode character-string bytes, replacing anything that isn't UTF-8."""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def _name(value: Union[dns.name.Name, str]) -> str:
    if isinstance(value, dns.name.Name):
        return value.to_text()
    return value


@dataclass(frozen=True)
class AData:
    address: str


@dataclass(frozen=True)
class AAAAData:
    address: str


@dataclass(frozen=True)
class CNAMEData:
    target: str


@dataclass(frozen=True)
class NSData:
    target: str


@dataclass(frozen=True)
class PTRData:
    target: str


@dataclass(frozen=True)
class MXData:
    preference: int
    exchange: str


@dataclass(frozen=True)
class SOAData:
    mname: str
    rname: str
    serial: int
    refresh: int
    retry: int
    expire: int
    minimum: int


@dataclass(frozen=True)
class SRVData:
    priority: int
    weight: int
    port: int
    target: str


@dataclass(frozen=True)
class TXTData:
    strings: tuple[str, ...]


@dataclass(frozen=True)
class CAAData:
    issuer_critical: bool
    tag: str
    value: str


@dataclass(frozen=True)
class TLSAData:
    cert_usage: int
    selector: int
    matching_type: int
    cert_data: bytes


@dataclass(frozen=True)
class SSHFPData:
    algorithm: int
    fingerprint_type: int
    fingerprint: bytes


@dataclass(frozen=True)
class HINFOData:
    cpu: str
    os: str


@dataclass(frozen=True)
class OpaqueData:
    """Any other record type, already rendered by the resolver library."""

    text: str


RecordData = Union[
    AData,
    AAAAData,
    CNAMEData,
    NSData,
    PTRData,
    MXData,
    SOAData,
    SRVData,
    TXTData,
    CAAData,
    TLSAData,
    SSHFPData,
    HINFOData,
    OpaqueData,
]


@dataclass(frozen=True)
class ResolvedRecord:
    """One answer record as returned by the resolver."""

    owner_name: str
    record_type: int
    ttl: int
    data: RecordData


# CAA flags byte: bit 0 (0x80) is the issuer-critical flag
CAA_ISSUER_CRITICAL = 0x80


def data_from_rdata(rdata: dns.rdata.Rdata) -> RecordData:
    """Convert dnspython rdata into the matching payload variant."""
    rdtype = rdata.rdtype
    T = dns.rdatatype.RdataType

    if rdtype == T.A:
        return AData(rdata.address)
    if rdtype == T.AAAA:
        return AAAAData(rdata.address)
    if rdtype == T.CNAME:
        return CNAMEData(_name(rdata.target))
    if rdtype == T.NS:
        return NSData(_name(rdata.target))
    if rdtype == T.PTR:
        return PTRData(_name(rdata.target))
    if rdtype == T.MX:
        return MXData(rdata.preference, _name(rdata.exchange))
    if rdtype == T.SOA:
        return SOAData(
            _name(rdata.mname),
            _name(rdata.rname),
            rdata.serial,
            rdata.refresh,
            rdata.retry,
            rdata.expire,
            rdata.minimum,
        )
    if rdtype == T.SRV:
        return SRVData(rdata.priority, rdata.weight, rdata.port, _name(rdata.target))
    if rdtype == T.TXT:
        return TXTData(tuple(_text(s) for s in rdata.strings))
    if rdtype == T.CAA:
        return CAAData(
            bool(rdata.flags & CAA_ISSUER_CRITICAL),
            _text(rdata.tag),
            _text(rdata.value),
        )
    if rdtype == T.TLSA:
        return TLSAData(rdata.usage, rdata.selector, rdata.mtype, rdata.cert)
    if rdtype == T.SSHFP:
        return SSHFPData(rdata.algorithm, rdata.fp_type, rdata.fingerprint)
    if rdtype == T.HINFO:
        return HINFOData(_text(rdata.cpu), _text(rdata.os))

    return OpaqueData(rdata.to_text())


def record_from_rdata(owner: dns.name.Name, ttl: int, rdata: dns.rdata.Rdata) -> ResolvedRecord:
    """Build a ResolvedRecord from one rdata of an answer rrset."""
    return ResolvedRecord(
        owner_name=_name(owner),
        record_type=int(rdata.rdtype),
        ttl=ttl,
        data=data_from_rdata(rdata),
    )
