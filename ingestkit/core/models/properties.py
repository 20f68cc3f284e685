"""Mutable configuration record populated by ingestion options.

The record is written by options and read by the transport layer. Its
``ingestion`` section doubles as the queued-ingestion message, so field aliases
follow the service's wire keys.
"""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .formats import DataFormat


class ReportLevel(IntEnum):
    """Which ingestion outcomes the service reports back."""

    FAILURES_ONLY = 0
    DO_NOT_REPORT = 1
    FAILURE_AND_SUCCESS = 2


class ReportMethod(IntEnum):
    """Where the service reports ingestion status."""

    QUEUE = 0
    TABLE = 1
    QUEUE_AND_TABLE = 2


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class AdditionalProperties(_WireModel):
    """Optional ingestion settings sent under ``AdditionalProperties``."""

    authorization_context: str | None = Field(None, alias="authorizationContext")
    ingestion_mapping: str | None = Field(None, alias="ingestionMapping")
    ingestion_mapping_ref: str | None = Field(None, alias="ingestionMappingReference")
    ingestion_mapping_type: DataFormat | None = Field(None, alias="ingestionMappingType")
    validation_policy: str | None = Field(None, alias="ValidationPolicy")
    format: DataFormat | None = Field(None, alias="format")
    tags: list[str] | None = Field(None, alias="tags")
    ingest_if_not_exists: str | None = Field(None, alias="ingestIfNotExists")
    creation_time: datetime | None = Field(None, alias="creationTime")

    @field_serializer("ingestion_mapping_type", "format")
    def serialize_format(self, value: DataFormat | None) -> str | None:
        if value is None:
            return None
        return value.camel_name


class IngestionProperties(_WireModel):
    """Ingestion section of the record, serialized as the queued message."""

    id: UUID | None = Field(None, alias="Id")
    blob_path: str | None = Field(None, alias="BlobPath")
    raw_data_size: int | None = Field(None, alias="RawDataSize")
    database_name: str | None = Field(None, alias="DatabaseName")
    table_name: str | None = Field(None, alias="TableName")
    retain_blob_on_success: bool = Field(True, alias="RetainBlobOnSuccess")
    flush_immediately: bool = Field(False, alias="FlushImmediately")
    ignore_size_limit: bool = Field(False, alias="IgnoreSizeLimit")
    report_level: ReportLevel = Field(ReportLevel.FAILURES_ONLY, alias="ReportLevel")
    report_method: ReportMethod = Field(ReportMethod.QUEUE, alias="ReportMethod")
    source_message_creation_time: datetime | None = Field(None, alias="SourceMessageCreationTime")
    additional: AdditionalProperties = Field(default_factory=AdditionalProperties, alias="AdditionalProperties")


class SourceOptions(BaseModel):
    """Local handling of the source data; never sent to the service."""

    id: UUID | None = None
    delete_local_source: bool = False
    dont_compress: bool = False


class StreamingProperties(BaseModel):
    """Settings used only by streaming ingestion."""

    client_request_id: str | None = None


class AllProperties(BaseModel):
    """The full configuration record handed to the transport layer."""

    ingestion: IngestionProperties = Field(default_factory=IngestionProperties)
    source: SourceOptions = Field(default_factory=SourceOptions)
    streaming: StreamingProperties = Field(default_factory=StreamingProperties)

    @classmethod
    def for_table(cls, database: str, table: str) -> AllProperties:
        """Create a record targeting ``database``.``table``."""
        return cls(ingestion=IngestionProperties(database_name=database, table_name=table))

    def to_message(self) -> dict[str, Any]:
        """Queued-ingestion message with unset values omitted."""
        return self.ingestion.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.ingestion.model_dump_json(by_alias=True, exclude_none=True)


__all__ = [
    "AdditionalProperties",
    "AllProperties",
    "IngestionProperties",
    "ReportLevel",
    "ReportMethod",
    "SourceOptions",
    "StreamingProperties",
]
