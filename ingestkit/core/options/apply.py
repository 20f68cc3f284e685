"""Apply a batch of options to a configuration record."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ingestkit.core.exceptions import IngestOptionError
from ingestkit.core.logging import get_logger
from ingestkit.core.models.properties import AllProperties

from .base import FileOption, Option
from .scopes import SCOPE_NAMES, OptionScope, scope_names

if TYPE_CHECKING:
    from ingestkit.core.config import IngestDefaults

logger = get_logger(__name__)


def scope_violations(option: FileOption, scopes: OptionScope) -> list[str]:
    """Names of every requested scope ``option`` is not allowed in, without running it."""

    if isinstance(option, Option):
        return [SCOPE_NAMES[scope] for scope in option.violations(scopes)]
    return [SCOPE_NAMES[scope] for scope in SCOPE_NAMES if (scopes & scope) and not (option.scopes & scope)]


def _default_options(defaults: IngestDefaults, scopes: OptionScope, requested: list[str]) -> list[FileOption]:
    # configured defaults only apply where the call's scopes allow them
    options: list[FileOption] = []
    for option in defaults.to_options():
        rejected = scope_violations(option, scopes)
        if rejected:
            logger.bind(option=option.name).debug("default option skipped", scopes=requested, rejected=rejected)
            continue
        options.append(option)
    return options


def apply_options(
    options: Iterable[FileOption],
    scopes: OptionScope,
    properties: AllProperties | None = None,
    *,
    defaults: IngestDefaults | None = None,
) -> AllProperties:
    """Run ``options`` in order against one record and return it.

    When ``defaults`` is given, its options run first, so an explicit option of
    the same kind overrides them. A default that is not allowed in ``scopes`` is
    skipped rather than rejected.

    The first option that is rejected or fails stops the batch and its error is
    re-raised. Fields written by options earlier in the batch are kept.
    """

    record = properties if properties is not None else AllProperties()
    requested = scope_names(scopes)
    batch: list[FileOption] = _default_options(defaults, scopes, requested) if defaults is not None else []
    batch.extend(options)
    for option in batch:
        try:
            option.run(record, scopes)
        except IngestOptionError as error:
            logger.bind(option=option.name, error_code=error.error_code).warning(
                "option rejected: {reason}", reason=error.message, scopes=requested
            )
            raise
        logger.bind(option=option.name).debug("option applied", scopes=requested)
    return record


__all__ = ["apply_options", "scope_violations"]
