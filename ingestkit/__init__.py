"""ingestkit - scoped options for data ingestion requests.

Options are composed by the caller, checked against the scopes of the
ingestion method being invoked and applied to the configuration record handed
to the transport layer.

Examples:
    >>> from ingestkit import OptionScope, apply_options, tags, flush_immediately
    >>> record = apply_options(
    ...     [tags(["nightly"]), flush_immediately()],
    ...     OptionScope.INGEST_FROM_FILE | OptionScope.QUEUED_INGEST,
    ... )
    >>> record.ingestion.additional.tags
    ['nightly']
"""

from ingestkit.core.exceptions import ErrorKind, ErrorOp, IngestKitError, IngestOptionError
from ingestkit.core.models import (
    AllProperties,
    DataFormat,
    ReportLevel,
    ReportMethod,
    ValidationImplication,
    ValidationOption,
    ValPolicy,
)
from ingestkit.core.options import (
    DeliveryMode,
    FileOption,
    IngestSource,
    Option,
    OptionScope,
    apply_options,
    client_request_id,
    delete_source,
    file_format,
    flush_immediately,
    if_not_exists,
    ignore_size_limit,
    ingestion_mapping,
    ingestion_mapping_ref,
    report_result_to_table,
    request_scopes,
    set_creation_time,
    tags,
    validation_policy,
)

__version__ = "0.1.0"

__all__ = [
    "AllProperties",
    "DataFormat",
    "DeliveryMode",
    "ErrorKind",
    "ErrorOp",
    "FileOption",
    "IngestKitError",
    "IngestOptionError",
    "IngestSource",
    "Option",
    "OptionScope",
    "ReportLevel",
    "ReportMethod",
    "ValPolicy",
    "ValidationImplication",
    "ValidationOption",
    "apply_options",
    "client_request_id",
    "delete_source",
    "file_format",
    "flush_immediately",
    "if_not_exists",
    "ignore_size_limit",
    "ingestion_mapping",
    "ingestion_mapping_ref",
    "report_result_to_table",
    "request_scopes",
    "set_creation_time",
    "tags",
    "validation_policy",
]
