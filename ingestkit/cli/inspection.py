"""Commands inspecting scopes, formats and the option support matrix."""

from __future__ import annotations

import typer

from ingestkit.core.models.formats import DataFormat
from ingestkit.core.options import SCOPE_NAMES, OptionScope, describe_catalog, parse_scope, scope_violations

from .constants import VALIDATION_EXIT_CODE
from .utils import emit_error, prepare_output

SCOPE_COLUMNS = ["scope", "bit"]
FORMAT_COLUMNS = ["format", "wire_name", "extension", "mapping_kind", "compress"]
CHECK_COLUMNS = ["option", "allowed", "rejected_scopes"]


def register(app: typer.Typer) -> None:
    """Register inspection commands on the root CLI application."""

    app.command("scopes")(scopes_command)
    app.command("formats")(formats_command)
    app.command("options")(options_command)
    app.command("check")(check_command)


def scopes_command(ctx: typer.Context) -> None:
    """List the option scopes and their bit values."""

    formatter, stream, stack = prepare_output(ctx)
    rows = [{"scope": name, "bit": int(scope)} for scope, name in SCOPE_NAMES.items()]
    try:
        formatter.render(rows, stream=stream, columns=SCOPE_COLUMNS)
    finally:
        stack.close()


def formats_command(
    ctx: typer.Context,
    mapping_only: bool = typer.Option(False, "--mapping-only", help="Only list formats usable as mapping kinds."),
) -> None:
    """List supported source data formats."""

    formatter, stream, stack = prepare_output(ctx)
    rows = [
        {
            "format": data_format.value,
            "wire_name": data_format.camel_name,
            "extension": data_format.extension,
            "mapping_kind": data_format.is_valid_mapping_kind,
            "compress": data_format.should_compress,
        }
        for data_format in DataFormat
        if data_format is not DataFormat.UNKNOWN and (data_format.is_valid_mapping_kind or not mapping_only)
    ]
    try:
        formatter.render(rows, stream=stream, columns=FORMAT_COLUMNS)
    finally:
        stack.close()


def options_command(ctx: typer.Context) -> None:
    """Show which scopes every catalog option is allowed in."""

    formatter, stream, stack = prepare_output(ctx)
    columns = ["option", *SCOPE_NAMES.values()]
    rows = [
        {"option": option.name, **{name: bool(option.scopes & scope) for scope, name in SCOPE_NAMES.items()}}
        for option in describe_catalog()
    ]
    try:
        formatter.render(rows, stream=stream, columns=columns)
    finally:
        stack.close()


def check_command(
    ctx: typer.Context,
    scope: list[str] = typer.Option(..., "--scope", "-s", help="Requested scope, e.g. file or QueuedIngest."),
    option: list[str] = typer.Option(None, "--option", help="Option name to check; all options when omitted."),
) -> None:
    """Check which options may be used for a combination of scopes."""

    requested = OptionScope(0)
    for name in scope:
        try:
            requested |= parse_scope(name)
        except ValueError as exc:
            emit_error(str(exc), "UNKNOWN_SCOPE", details={"scope": name})
            raise typer.Exit(code=VALIDATION_EXIT_CODE) from exc

    catalog = {entry.name.lower(): entry for entry in describe_catalog()}
    selected = list(catalog.values())
    if option:
        unknown = [name for name in option if name.lower() not in catalog]
        if unknown:
            emit_error("Unknown option name", "UNKNOWN_OPTION", details={"options": unknown})
            raise typer.Exit(code=VALIDATION_EXIT_CODE)
        selected = [catalog[name.lower()] for name in option]

    rows: list[dict[str, object]] = []
    for entry in selected:
        rejected = scope_violations(entry, requested)
        rows.append({"option": entry.name, "allowed": not rejected, "rejected_scopes": ", ".join(rejected) or None})

    formatter, stream, stack = prepare_output(ctx)
    try:
        formatter.render(rows, stream=stream, columns=CHECK_COLUMNS)
    finally:
        stack.close()

    if any(not row["allowed"] for row in rows):
        raise typer.Exit(code=VALIDATION_EXIT_CODE)


__all__ = ["register"]
