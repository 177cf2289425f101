"""
Rendering of record payloads into the DoH JSON "data" strings.

Every consumer that parses "data" structurally depends on these exact
templates, so field order and quoting must not change.
"""

from dnsolve.dns.records import (
    AAAAData,
    AData,
    CAAData,
    CNAMEData,
    HINFOData,
    MXData,
    NSData,
    OpaqueData,
    PTRData,
    RecordData,
    SOAData,
    SRVData,
    SSHFPData,
    TLSAData,
    TXTData,
)


def record_data_to_text(data: RecordData) -> str:
    """
    Render a record payload as the DoH "data" string.

    OpaqueData falls back to the resolver library's presentation format,
    which is best-effort and may change between library versions.
    """
    if isinstance(data, (AData, AAAAData)):
        return data.address
    if isinstance(data, (CNAMEData, NSData, PTRData)):
        return data.target
    if isinstance(data, MXData):
        return f"{data.preference} {data.exchange}"
    if isinstance(data, SOAData):
        return (
            f"{data.mname} {data.rname} {data.serial} {data.refresh} "
            f"{data.retry} {data.expire} {data.minimum}"
        )
    if isinstance(data, SRVData):
        return f"{data.priority} {data.weight} {data.port} {data.target}"
    if isinstance(data, TXTData):
        return '"' + "".join(data.strings) + '"'
    if isinstance(data, CAAData):
        flags = 128 if data.issuer_critical else 0
        return f'{flags} {data.tag} "{data.value}"'
    if isinstance(data, TLSAData):
        return (
            f"{data.cert_usage} {data.selector} {data.matching_type} "
            f"{data.cert_data.hex()}"
        )
    if isinstance(data, SSHFPData):
        return f"{data.algorithm} {data.fingerprint_type} {data.fingerprint.hex()}"
    if isinstance(data, HINFOData):
        return f"{data.cpu} {data.os}"
    if isinstance(data, OpaqueData):
        return data.text

    raise TypeError(f"Unsupported record data: {type(data).__name__}")
