"""Catalog of ingestion options.

Every factory returns an :class:`Option` whose declared scopes follow the
support matrix of the ingestion method it configures.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from ingestkit.core.exceptions import ErrorCode, ErrorKind, IngestOptionError
from ingestkit.core.models.formats import DataFormat
from ingestkit.core.models.policy import ValPolicy
from ingestkit.core.models.properties import AllProperties, ReportLevel, ReportMethod

from .base import Option
from .scopes import OptionScope

_FILE = OptionScope.INGEST_FROM_FILE
_READER = OptionScope.INGEST_FROM_READER
_BLOB = OptionScope.INGEST_FROM_BLOB
_QUEUED = OptionScope.QUEUED_INGEST
_STREAMING = OptionScope.STREAMING_INGEST


def flush_immediately() -> Option:
    """Tell the service to flush on write."""

    def run(p: AllProperties) -> None:
        p.ingestion.flush_immediately = True

    return Option(name="FlushImmediately", scopes=_FILE | _READER | _BLOB | _QUEUED, apply=run)


def _check_mapping_kind(option: str, kind: DataFormat) -> None:
    if not kind.is_valid_mapping_kind:
        raise IngestOptionError.from_template(
            ErrorCode.UNSUPPORTED_MAPPING_KIND, encoding=kind.camel_name or "Unknown", option=option
        ).set_no_retry()


def _encode_mapping(mapping: Any) -> str:
    if isinstance(mapping, str):
        return mapping
    if isinstance(mapping, (bytes, bytearray)):
        return bytes(mapping).decode("utf-8")
    if isinstance(mapping, BaseModel):
        return mapping.model_dump_json(by_alias=True)
    return json.dumps(mapping, separators=(",", ":"), allow_nan=False)


def ingestion_mapping(mapping: Any, mapping_kind: DataFormat) -> Option:
    """Provide a runtime mapping of the source data to the table's columns.

    ``mapping`` is JSON encoded, so it can be anything ``json.dumps`` accepts or
    a pydantic model. A ``str`` or ``bytes`` value is taken to be JSON already.
    ``mapping_kind`` must be a mapping kind: CSV, JSON, AVRO, ApacheAvro,
    Parquet or ORC.
    """

    def run(p: AllProperties) -> None:
        _check_mapping_kind("IngestionMapping", mapping_kind)
        try:
            encoded = _encode_mapping(mapping)
        except (TypeError, ValueError, PydanticSerializationError) as exc:
            raise IngestOptionError.from_template(
                ErrorCode.INVALID_MAPPING_PAYLOAD, option="IngestionMapping", reason=exc
            ).set_no_retry() from exc

        p.ingestion.additional.ingestion_mapping = encoded
        p.ingestion.additional.ingestion_mapping_type = mapping_kind

    return Option(name="IngestionMapping", scopes=_FILE | _READER | _BLOB | _QUEUED, apply=run)


def ingestion_mapping_ref(ref_name: str, mapping_kind: DataFormat) -> Option:
    """Name a mapping pre-created on the table.

    ``mapping_kind`` must be a mapping kind: CSV, JSON, AVRO, ApacheAvro,
    Parquet or ORC.
    """

    def run(p: AllProperties) -> None:
        _check_mapping_kind("IngestionMappingRef", mapping_kind)
        p.ingestion.additional.ingestion_mapping_ref = ref_name
        p.ingestion.additional.ingestion_mapping_type = mapping_kind

    return Option(name="IngestionMappingRef", scopes=_FILE | _READER | _BLOB | _QUEUED | _STREAMING, apply=run)


def delete_source() -> Option:
    """Delete the local source file once it has been uploaded."""

    def run(p: AllProperties) -> None:
        p.source.delete_local_source = True

    return Option(name="DeleteSource", scopes=_FILE | _QUEUED | _STREAMING, apply=run)


def ignore_size_limit() -> Option:
    def run(p: AllProperties) -> None:
        p.ingestion.ignore_size_limit = True

    return Option(name="IgnoreSizeLimit", scopes=_FILE | _READER | _QUEUED, apply=run)


def tags(values: Sequence[str]) -> Option:
    """Tags to associate with the ingested data."""

    captured = list(values)

    def run(p: AllProperties) -> None:
        p.ingestion.additional.tags = list(captured)

    return Option(name="Tags", scopes=_FILE | _READER | _QUEUED, apply=run)


def if_not_exists(ingest_by_tag: str) -> Option:
    """Skip the ingestion if the table already holds extents tagged ``ingest-by:<ingest_by_tag>``.

    This makes repeated ingestion of the same data idempotent.
    """

    def run(p: AllProperties) -> None:
        p.ingestion.additional.ingest_if_not_exists = ingest_by_tag

    return Option(name="IfNotExists", scopes=_FILE | _READER | _QUEUED, apply=run)


def report_result_to_table() -> Option:
    """Track the ingestion status in a status table.

    Table reporting slows down high-volume ingestion; enable it temporarily when
    debugging failed ingestions.
    """

    def run(p: AllProperties) -> None:
        p.ingestion.report_level = ReportLevel.FAILURE_AND_SUCCESS
        p.ingestion.report_method = ReportMethod.TABLE

    return Option(name="ReportResultToTable", scopes=_FILE | _READER | _BLOB | _QUEUED | _STREAMING, apply=run)


def set_creation_time(creation_time: datetime) -> Option:
    """Override the creation time retention policies are evaluated against.

    Without it the time of ingestion is used.
    """

    def run(p: AllProperties) -> None:
        p.ingestion.additional.creation_time = creation_time

    return Option(name="SetCreationTime", scopes=_FILE | _READER | _BLOB | _QUEUED, apply=run)


def validation_policy(policy: ValPolicy) -> Option:
    """Validate the source data against ``policy`` during ingestion."""

    def run(p: AllProperties) -> None:
        try:
            encoded = policy.to_json()
        except (PydanticSerializationError, ValueError) as exc:
            raise IngestOptionError.from_template(
                ErrorCode.VALIDATION_POLICY_ENCODING, kind=ErrorKind.INTERNAL, reason=exc
            ).set_no_retry() from exc

        # Blob-only ingestion ignores the policy.
        p.ingestion.additional.validation_policy = encoded

    return Option(name="ValidationPolicy", scopes=_FILE | _READER | _BLOB | _QUEUED, apply=run)


def file_format(data_format: DataFormat) -> Option:
    """Declare the source format when it cannot be inferred from the file name.

    ``input.json`` or ``input.json.gz`` need no option, ``input`` does.
    """

    def run(p: AllProperties) -> None:
        p.ingestion.additional.format = data_format

    return Option(name="FileFormat", scopes=_FILE | _READER | _BLOB | _QUEUED | _STREAMING, apply=run)


def client_request_id(request_id: str) -> Option:
    """Identifier for the ingestion that can be queried later."""

    def run(p: AllProperties) -> None:
        p.streaming.client_request_id = request_id

    return Option(name="ClientRequestId", scopes=_FILE | _READER | _BLOB | _STREAMING, apply=run)


def describe_catalog() -> list[Option]:
    """One instance of every catalog option, for inspecting names and scopes."""

    return [
        flush_immediately(),
        ingestion_mapping("[]", DataFormat.JSON),
        ingestion_mapping_ref("mapping", DataFormat.JSON),
        delete_source(),
        ignore_size_limit(),
        tags([]),
        if_not_exists(""),
        report_result_to_table(),
        set_creation_time(datetime.min),
        validation_policy(ValPolicy()),
        file_format(DataFormat.UNKNOWN),
        client_request_id(""),
    ]


__all__ = [
    "client_request_id",
    "delete_source",
    "describe_catalog",
    "file_format",
    "flush_immediately",
    "if_not_exists",
    "ignore_size_limit",
    "ingestion_mapping",
    "ingestion_mapping_ref",
    "report_result_to_table",
    "set_creation_time",
    "tags",
    "validation_policy",
]
