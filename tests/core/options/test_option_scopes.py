"""Scope checking performed by every catalog option."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from itertools import combinations

import pytest

from ingestkit.core.exceptions import ErrorCode, ErrorKind, ErrorOp, IngestOptionError
from ingestkit.core.models import AllProperties, DataFormat, ValidationImplication, ValidationOption, ValPolicy
from ingestkit.core.options import (
    SCOPE_NAMES,
    Option,
    OptionScope,
    client_request_id,
    delete_source,
    file_format,
    flush_immediately,
    if_not_exists,
    ignore_size_limit,
    ingestion_mapping,
    ingestion_mapping_ref,
    iter_scopes,
    report_result_to_table,
    set_creation_time,
    tags,
    validation_policy,
)

FILE = OptionScope.INGEST_FROM_FILE
READER = OptionScope.INGEST_FROM_READER
BLOB = OptionScope.INGEST_FROM_BLOB
QUEUED = OptionScope.QUEUED_INGEST
STREAMING = OptionScope.STREAMING_INGEST

CREATED = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)

# factory, declared scopes, check of the mutation on the record
CATALOG: list[tuple[Callable[[], Option], OptionScope, Callable[[AllProperties], bool]]] = [
    (flush_immediately, FILE | READER | BLOB | QUEUED, lambda p: p.ingestion.flush_immediately is True),
    (
        lambda: ingestion_mapping([{"column": "a"}], DataFormat.JSON),
        FILE | READER | BLOB | QUEUED,
        lambda p: p.ingestion.additional.ingestion_mapping == '[{"column":"a"}]',
    ),
    (
        lambda: ingestion_mapping_ref("events_mapping", DataFormat.CSV),
        FILE | READER | BLOB | QUEUED | STREAMING,
        lambda p: p.ingestion.additional.ingestion_mapping_ref == "events_mapping",
    ),
    (delete_source, FILE | QUEUED | STREAMING, lambda p: p.source.delete_local_source is True),
    (ignore_size_limit, FILE | READER | QUEUED, lambda p: p.ingestion.ignore_size_limit is True),
    (lambda: tags(["a", "b"]), FILE | READER | QUEUED, lambda p: p.ingestion.additional.tags == ["a", "b"]),
    (
        lambda: if_not_exists("batch-7"),
        FILE | READER | QUEUED,
        lambda p: p.ingestion.additional.ingest_if_not_exists == "batch-7",
    ),
    (
        report_result_to_table,
        FILE | READER | BLOB | QUEUED | STREAMING,
        lambda p: p.ingestion.report_method == 1 and p.ingestion.report_level == 2,
    ),
    (
        lambda: set_creation_time(CREATED),
        FILE | READER | BLOB | QUEUED,
        lambda p: p.ingestion.additional.creation_time == CREATED,
    ),
    (
        lambda: validation_policy(ValPolicy(options=ValidationOption.SAME_NUMBER_OF_FIELDS)),
        FILE | READER | BLOB | QUEUED,
        lambda p: p.ingestion.additional.validation_policy is not None,
    ),
    (
        lambda: file_format(DataFormat.PARQUET),
        FILE | READER | BLOB | QUEUED | STREAMING,
        lambda p: p.ingestion.additional.format is DataFormat.PARQUET,
    ),
    (
        lambda: client_request_id("req-1"),
        FILE | READER | BLOB | STREAMING,
        lambda p: p.streaming.client_request_id == "req-1",
    ),
]


def _rejections() -> list[tuple[Callable[[], Option], OptionScope]]:
    return [
        (factory, scope)
        for factory, declared, _ in CATALOG
        for scope in SCOPE_NAMES
        if not declared & scope
    ]


def _subsets() -> list[tuple[Callable[[], Option], OptionScope, Callable[[AllProperties], bool]]]:
    cases = []
    for factory, declared, check in CATALOG:
        flags = list(iter_scopes(declared))
        for size in range(1, len(flags) + 1):
            for combo in combinations(flags, size):
                requested = OptionScope(0)
                for flag in combo:
                    requested |= flag
                cases.append((factory, requested, check))
    return cases


@pytest.mark.parametrize(("factory", "declared", "_check"), CATALOG)
def test_option_declares_documented_scopes(factory, declared, _check) -> None:
    assert factory().scopes == declared


@pytest.mark.parametrize(("factory", "scope"), _rejections())
def test_option_rejects_undeclared_scope(factory, scope: OptionScope) -> None:
    option = factory()
    record = AllProperties()
    before = record.model_dump()

    with pytest.raises(IngestOptionError) as excinfo:
        option.run(record, scope)

    error = excinfo.value
    assert error.kind is ErrorKind.CLIENT_ARGS
    assert error.code is ErrorCode.OPTION_SCOPE_VIOLATION
    assert error.retryable is False
    assert error.permanent is True
    assert option.name in error.message
    assert SCOPE_NAMES[scope] in error.message
    assert record.model_dump() == before


@pytest.mark.parametrize(("factory", "requested", "check"), _subsets())
def test_option_applies_for_every_declared_subset(factory, requested: OptionScope, check) -> None:
    record = AllProperties()

    factory().run(record, requested)

    assert check(record)


def test_first_violation_follows_declaration_order() -> None:
    option = ignore_size_limit()

    with pytest.raises(IngestOptionError) as excinfo:
        option.run(AllProperties(), STREAMING | BLOB)

    assert excinfo.value.message == "Option IgnoreSizeLimit is not allowed in scope IngestFromBlob"


def test_client_request_id_rejected_when_queued() -> None:
    record = AllProperties()

    with pytest.raises(IngestOptionError) as excinfo:
        client_request_id("x").run(record, QUEUED | FILE)

    assert "QueuedIngest" in excinfo.value.message
    assert excinfo.value.op is ErrorOp.FILE_INGEST
    assert record.streaming.client_request_id is None


def test_client_request_id_applies_for_file_only() -> None:
    record = AllProperties()

    client_request_id("x").run(record, FILE)

    assert record.streaming.client_request_id == "x"


def test_streaming_op_tag_used_whenever_streaming_requested() -> None:
    with pytest.raises(IngestOptionError) as excinfo:
        tags(["a"]).run(AllProperties(), FILE | STREAMING)

    assert excinfo.value.op is ErrorOp.INGEST_STREAM
    assert "StreamingIngest" in excinfo.value.message


def test_undefined_scope_bits_are_rejected() -> None:
    record = AllProperties()

    with pytest.raises(IngestOptionError) as excinfo:
        flush_immediately().run(record, OptionScope(FILE | 1 << 7))

    assert excinfo.value.code is ErrorCode.UNKNOWN_SCOPE
    assert excinfo.value.retryable is False
    assert record.ingestion.flush_immediately is False


def test_empty_request_runs_mutation() -> None:
    record = AllProperties()

    delete_source().run(record, OptionScope(0))

    assert record.source.delete_local_source is True


def test_options_are_reusable_across_records() -> None:
    option = tags(["nightly"])
    first, second = AllProperties(), AllProperties()

    option.run(first, FILE)
    option.run(second, READER | QUEUED)

    assert first.ingestion.additional.tags == ["nightly"]
    assert second.ingestion.additional.tags == ["nightly"]
    assert first.ingestion.additional.tags is not second.ingestion.additional.tags


def test_option_displays_its_name() -> None:
    option = validation_policy(ValPolicy(implications=ValidationImplication.IGNORE_FAILURES))

    assert str(option) == "ValidationPolicy"
    assert f"{option}" == option.name
