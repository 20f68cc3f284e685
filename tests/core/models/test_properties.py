"""Tests for the configuration record and its queued message form."""

from __future__ import annotations

import json
from datetime import UTC, datetime

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
    OptionScope,
    apply_options,
    delete_source,
    file_format,
    ingestion_mapping_ref,
    report_result_to_table,
    set_creation_time,
    tags,
)


def test_record_defaults() -> None:
    record = AllProperties()

    assert record.ingestion.flush_immediately is False
    assert record.ingestion.retain_blob_on_success is True
    assert record.ingestion.report_level is ReportLevel.FAILURES_ONLY
    assert record.ingestion.report_method is ReportMethod.QUEUE
    assert record.ingestion.additional.tags is None
    assert record.source.delete_local_source is False
    assert record.streaming.client_request_id is None


def test_message_omits_unset_values() -> None:
    message = AllProperties.for_table("db", "events").to_message()

    assert message == {
        "DatabaseName": "db",
        "TableName": "events",
        "RetainBlobOnSuccess": True,
        "FlushImmediately": False,
        "IgnoreSizeLimit": False,
        "ReportLevel": 0,
        "ReportMethod": 0,
        "AdditionalProperties": {},
    }


def test_message_carries_applied_options() -> None:
    record = apply_options(
        [
            tags(["a", "b"]),
            ingestion_mapping_ref("events_json", DataFormat.JSON),
            file_format(DataFormat.MULTIJSON),
            report_result_to_table(),
            set_creation_time(datetime(2024, 1, 2, tzinfo=UTC)),
            delete_source(),
        ],
        OptionScope.INGEST_FROM_FILE | OptionScope.QUEUED_INGEST,
        AllProperties.for_table("db", "events"),
    )

    message = record.to_message()

    assert message["ReportLevel"] == 2
    assert message["ReportMethod"] == 1
    assert message["AdditionalProperties"] == {
        "ingestionMappingReference": "events_json",
        "ingestionMappingType": "Json",
        "format": "MultiJson",
        "tags": ["a", "b"],
        "creationTime": "2024-01-02T00:00:00Z",
    }
    # local source handling is not part of the message
    assert "DeleteLocalSource" not in json.dumps(message)
    assert json.loads(record.to_json()) == message


def test_val_policy_json_keys() -> None:
    policy = ValPolicy(
        options=ValidationOption.IGNORE_NON_DOUBLE_QUOTED_FIELDS,
        implications=ValidationImplication.FAIL_INGESTION,
    )

    assert policy.to_json() == '{"ValidationOptions":2,"ValidationImplications":0}'


def test_val_policy_accepts_wire_keys() -> None:
    policy = ValPolicy.model_validate({"ValidationOptions": 1, "ValidationImplications": 1})

    assert policy.options is ValidationOption.SAME_NUMBER_OF_FIELDS
    assert policy.implications is ValidationImplication.IGNORE_FAILURES
