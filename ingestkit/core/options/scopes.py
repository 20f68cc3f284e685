"""Scopes describing the ingestion entry point and delivery mode of a call."""

from __future__ import annotations

from enum import Enum, IntFlag
from types import MappingProxyType
from typing import Iterator


class OptionScope(IntFlag):
    """One bit per ingestion entry point or delivery mode."""

    INGEST_FROM_FILE = 1 << 0
    INGEST_FROM_READER = 1 << 1
    INGEST_FROM_BLOB = 1 << 2
    QUEUED_INGEST = 1 << 3
    STREAMING_INGEST = 1 << 4


ALL_SCOPES = (
    OptionScope.INGEST_FROM_FILE
    | OptionScope.INGEST_FROM_READER
    | OptionScope.INGEST_FROM_BLOB
    | OptionScope.QUEUED_INGEST
    | OptionScope.STREAMING_INGEST
)

# Declaration order is the order violations are reported in.
SCOPE_NAMES: MappingProxyType[OptionScope, str] = MappingProxyType(
    {
        OptionScope.INGEST_FROM_FILE: "IngestFromFile",
        OptionScope.INGEST_FROM_READER: "IngestFromReader",
        OptionScope.INGEST_FROM_BLOB: "IngestFromBlob",
        OptionScope.QUEUED_INGEST: "QueuedIngest",
        OptionScope.STREAMING_INGEST: "StreamingIngest",
    }
)


class IngestSource(str, Enum):
    """Where the ingested data comes from."""

    FILE = "file"
    READER = "reader"
    BLOB = "blob"


class DeliveryMode(str, Enum):
    """How the data is delivered to the service."""

    QUEUED = "queued"
    STREAMING = "streaming"
    MANAGED = "managed"  # streaming first, queued as fallback


_SOURCE_SCOPES = {
    IngestSource.FILE: OptionScope.INGEST_FROM_FILE,
    IngestSource.READER: OptionScope.INGEST_FROM_READER,
    IngestSource.BLOB: OptionScope.INGEST_FROM_BLOB,
}

_MODE_SCOPES = {
    DeliveryMode.QUEUED: OptionScope.QUEUED_INGEST,
    DeliveryMode.STREAMING: OptionScope.STREAMING_INGEST,
    DeliveryMode.MANAGED: OptionScope.QUEUED_INGEST | OptionScope.STREAMING_INGEST,
}


def iter_scopes(scopes: OptionScope | int) -> Iterator[OptionScope]:
    """Yield the defined flags set in ``scopes`` in declaration order."""

    for scope in SCOPE_NAMES:
        if scopes & scope:
            yield scope


def scope_names(scopes: OptionScope | int) -> list[str]:
    return [SCOPE_NAMES[scope] for scope in iter_scopes(scopes)]


def undefined_bits(scopes: OptionScope | int) -> int:
    """Bits in ``scopes`` that do not belong to any defined flag."""

    return int(scopes) & ~int(ALL_SCOPES)


def parse_scope(name: str) -> OptionScope:
    """Resolve a scope from its display name or a short alias such as ``queued``."""

    normalized = name.strip().lower().replace("-", "").replace("_", "")
    for scope, display in SCOPE_NAMES.items():
        aliases = {display.lower(), display.lower().removeprefix("ingestfrom"), display.lower().removesuffix("ingest")}
        if normalized in aliases:
            return scope
    raise ValueError(f"Unknown scope: {name!r}")


def request_scopes(source: IngestSource, mode: DeliveryMode) -> OptionScope:
    """Scopes a transport requests when ingesting from ``source`` via ``mode``."""

    return _SOURCE_SCOPES[source] | _MODE_SCOPES[mode]


__all__ = [
    "ALL_SCOPES",
    "DeliveryMode",
    "IngestSource",
    "OptionScope",
    "SCOPE_NAMES",
    "iter_scopes",
    "parse_scope",
    "request_scopes",
    "scope_names",
    "undefined_bits",
]
