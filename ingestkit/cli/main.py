"""Main entry point for the ingestkit command line interface."""

from __future__ import annotations

from pathlib import Path

import typer

from ingestkit.core.config import ConfigManager
from ingestkit.core.exceptions import ConfigurationError
from ingestkit.core.logging import configure_logging

from .constants import VALIDATION_EXIT_CODE
from .formatters import create_formatter
from .inspection import register as register_inspect_commands
from .utils import emit_error


def create_app() -> typer.Typer:
    """Create a Typer application instance for ingestkit."""

    app = typer.Typer(add_completion=False, help="Inspect ingestion option scopes and formats")

    @app.callback()
    def main(
        ctx: typer.Context,
        format: str = typer.Option(
            "table",
            "--format",
            "-f",
            help="Output format (table or jsonl).",
            show_default=True,
        ),
        output: Path | None = typer.Option(
            None,
            "--output",
            "-o",
            help="Write output to a file instead of stdout.",
        ),
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            help="Logging level, defaults to the configured one.",
        ),
        no_color: bool = typer.Option(
            False,
            "--no-color",
            help="Disable colorized output for table format.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        normalized_format = format.strip().lower()
        try:
            create_formatter(normalized_format, no_color=no_color)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--format") from exc

        ctx.obj.update(
            {
                "format": normalized_format,
                "output_path": output,
                "no_color": no_color,
            }
        )
        _configure_logging(log_level)

    register_inspect_commands(app)
    return app


def _configure_logging(level_name: str | None) -> None:
    try:
        settings = ConfigManager().get_config().logging
    except ConfigurationError as exc:
        emit_error(exc.message, exc.error_code, details=exc.details)
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from exc
    if level_name:
        settings.level = level_name.upper()
    log_config = settings.to_log_config()
    configure_logging(log_config.level, file_output=log_config.file_output, file_path=log_config.file_path)


app = create_app()
