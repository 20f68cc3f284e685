"""Option abstraction coupling a record mutation with the scopes it is legal in."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ingestkit.core.exceptions import ErrorCode, ErrorKind, ErrorOp, IngestOptionError
from ingestkit.core.models.properties import AllProperties

from .scopes import SCOPE_NAMES, OptionScope, undefined_bits


@runtime_checkable
class FileOption(Protocol):
    """Optional argument accepted by the ingestion entry points."""

    @property
    def name(self) -> str: ...

    @property
    def scopes(self) -> OptionScope: ...

    def run(self, properties: AllProperties, scopes: OptionScope) -> None: ...


@dataclass(frozen=True, slots=True)
class Option:
    """Concrete option: a name, its declared scopes and the mutation to apply.

    ``run`` checks that every flag in the requested ``scopes`` is also declared
    by the option before mutating the record. Flags are checked one at a time in
    declaration order so the error names the first scope that rejected it.
    """

    name: str
    scopes: OptionScope
    apply: Callable[[AllProperties], None]

    def __str__(self) -> str:
        return self.name

    def violations(self, scopes: OptionScope) -> list[OptionScope]:
        """Requested flags this option does not declare."""

        return [scope for scope in SCOPE_NAMES if (scopes & scope) and not (self.scopes & scope)]

    def run(self, properties: AllProperties, scopes: OptionScope) -> None:
        stray = undefined_bits(scopes)
        if stray:
            raise IngestOptionError.from_template(
                ErrorCode.UNKNOWN_SCOPE, option=self.name, bits=stray
            ).set_no_retry()

        rejected = self.violations(scopes)
        if rejected:
            op = ErrorOp.INGEST_STREAM if scopes & OptionScope.STREAMING_INGEST else ErrorOp.FILE_INGEST
            raise IngestOptionError.from_template(
                ErrorCode.OPTION_SCOPE_VIOLATION,
                op=op,
                kind=ErrorKind.CLIENT_ARGS,
                option=self.name,
                scope=SCOPE_NAMES[rejected[0]],
            ).set_no_retry()

        self.apply(properties)


__all__ = ["FileOption", "Option"]
