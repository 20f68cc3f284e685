"""Scoped ingestion options and the engine applying them."""

from .apply import apply_options, scope_violations
from .base import FileOption, Option
from .catalog import (
    client_request_id,
    delete_source,
    describe_catalog,
    file_format,
    flush_immediately,
    if_not_exists,
    ignore_size_limit,
    ingestion_mapping,
    ingestion_mapping_ref,
    report_result_to_table,
    set_creation_time,
    tags,
    validation_policy,
)
from .scopes import (
    ALL_SCOPES,
    SCOPE_NAMES,
    DeliveryMode,
    IngestSource,
    OptionScope,
    iter_scopes,
    parse_scope,
    request_scopes,
    scope_names,
)

__all__ = [
    "ALL_SCOPES",
    "DeliveryMode",
    "FileOption",
    "IngestSource",
    "Option",
    "OptionScope",
    "SCOPE_NAMES",
    "apply_options",
    "client_request_id",
    "delete_source",
    "describe_catalog",
    "file_format",
    "flush_immediately",
    "if_not_exists",
    "ignore_size_limit",
    "ingestion_mapping",
    "ingestion_mapping_ref",
    "iter_scopes",
    "parse_scope",
    "report_result_to_table",
    "request_scopes",
    "scope_names",
    "scope_violations",
    "set_creation_time",
    "tags",
    "validation_policy",
]
