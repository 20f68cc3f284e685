"""Data validation policy sent along with an ingestion request."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class ValidationOption(IntEnum):
    """Check flagging source data that does not validate."""

    UNKNOWN = 0
    SAME_NUMBER_OF_FIELDS = 1  # every record must have the same number of fields
    IGNORE_NON_DOUBLE_QUOTED_FIELDS = 2


class ValidationImplication(IntEnum):
    """What the service does when the validation policy is violated."""

    FAIL_INGESTION = 0
    IGNORE_FAILURES = 1


class ValPolicy(BaseModel):
    """Validation option paired with the implication of violating it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    options: ValidationOption = Field(ValidationOption.UNKNOWN, alias="ValidationOptions")
    implications: ValidationImplication = Field(ValidationImplication.FAIL_INGESTION, alias="ValidationImplications")

    def to_json(self) -> str:
        """Compact JSON form expected by the service, e.g. ``{"ValidationOptions":1,...}``."""
        return self.model_dump_json(by_alias=True)


__all__ = ["ValPolicy", "ValidationImplication", "ValidationOption"]
