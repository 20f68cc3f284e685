"""Classified errors raised while applying ingestion options."""

from __future__ import annotations

from typing import Any, Mapping

from ingestkit.core.exceptions.base import IngestKitError
from ingestkit.core.exceptions.codes import TRANSIENT_KINDS, ErrorCode, ErrorKind, ErrorOp
from ingestkit.core.exceptions.messages import ErrorMessageTemplate


class IngestOptionError(IngestKitError):
    """Error carrying the operation, classification and retry marker of a failure."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        op: ErrorOp = ErrorOp.UNKNOWN,
        kind: ErrorKind = ErrorKind.CLIENT_ARGS,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        payload = dict(context or {})
        details = {**payload, "op": op.value, "kind": kind.value}
        super().__init__(message, code.value, details)
        self.code = code
        self.op = op
        self.kind = kind
        self.context = payload
        self.permanent = False

    @classmethod
    def from_template(
        cls,
        code: ErrorCode,
        *,
        op: ErrorOp = ErrorOp.UNKNOWN,
        kind: ErrorKind = ErrorKind.CLIENT_ARGS,
        **context: Any,
    ) -> IngestOptionError:
        """Build an error whose message is rendered from the template for ``code``."""

        message = ErrorMessageTemplate.get_message(code, **context)
        return cls(message, code, op=op, kind=kind, context=context)

    def set_no_retry(self) -> IngestOptionError:
        """Mark the error as permanent so callers never resubmit the request."""

        self.permanent = True
        self.details["retryable"] = False
        return self

    @property
    def retryable(self) -> bool:
        return not self.permanent and self.kind in TRANSIENT_KINDS

    def to_payload(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        return {
            "code": self.code.value,
            "message": self.message,
            "op": self.op.value,
            "kind": self.kind.value,
            "retryable": self.retryable,
            "context": {key: str(value) for key, value in self.context.items()},
        }
