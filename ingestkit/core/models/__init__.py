"""Data models for ingestion configuration."""

from .formats import MAPPING_KINDS, DataFormat
from .policy import ValidationImplication, ValidationOption, ValPolicy
from .properties import (
    AdditionalProperties,
    AllProperties,
    IngestionProperties,
    ReportLevel,
    ReportMethod,
    SourceOptions,
    StreamingProperties,
)

__all__ = [
    "AdditionalProperties",
    "AllProperties",
    "DataFormat",
    "IngestionProperties",
    "MAPPING_KINDS",
    "ReportLevel",
    "ReportMethod",
    "SourceOptions",
    "StreamingProperties",
    "ValPolicy",
    "ValidationImplication",
    "ValidationOption",
]
