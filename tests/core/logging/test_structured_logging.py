"""Tests for structured logging with trace propagation."""

from __future__ import annotations

import io
import json

from ingestkit.core.logging import LogConfig, StructuredLogger, configure_logging, get_logger


def _read_records(stream: io.StringIO) -> list[dict[str, object]]:
    stream.seek(0)
    lines = [line for line in stream.getvalue().splitlines() if line.strip()]
    return [json.loads(line) for line in lines]


def test_structured_log_contains_trace_and_context() -> None:
    buffer = io.StringIO()
    logger = StructuredLogger(LogConfig(console_stream=buffer))

    with logger.context(trace_id="trace-123", option="Tags", error_code="OPTION_SCOPE_VIOLATION", request_id="req-42"):
        logger.logger.info("option rejected", scope="QueuedIngest")

    records = _read_records(buffer)
    assert len(records) == 1
    record = records[0]
    assert record["trace_id"] == "trace-123"
    assert record["option"] == "Tags"
    assert record["error_code"] == "OPTION_SCOPE_VIOLATION"
    assert record["context"]["request_id"] == "req-42"
    assert record["context"]["scope"] == "QueuedIngest"
    configure_logging("WARNING")


def test_trace_id_propagates_within_context() -> None:
    buffer = io.StringIO()
    logger = StructuredLogger(LogConfig(console_stream=buffer))

    with logger.context() as trace_id:
        logger.logger.info("first event")
        logger.logger.info("second event")

    logger.logger.info("outside context")

    records = _read_records(buffer)
    assert len(records) == 3
    assert records[0]["trace_id"] == records[1]["trace_id"] == trace_id
    assert records[2]["trace_id"] != records[0]["trace_id"]
    configure_logging("WARNING")


def test_level_filters_records() -> None:
    buffer = io.StringIO()
    StructuredLogger(LogConfig(level="WARNING", console_stream=buffer))

    log = get_logger("ingestkit.tests")
    log.debug("hidden")
    log.warning("shown")

    records = _read_records(buffer)
    assert [r["message"] for r in records] == ["shown"]
    assert records[0]["context"]["logger_name"] == "ingestkit.tests"
    configure_logging("WARNING")
