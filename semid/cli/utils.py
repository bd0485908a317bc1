"""CLI utilities for dual-mode output (human-friendly + machine-readable).

This module provides utilities for CLI commands to support both:
- Human mode (default): Rich formatting with colors and tables
- Machine mode (--json): Structured JSON output for scripts

Example:
    from ..utils import Output, ExitCode

    @app.command()
    def my_command():
        out = Output(console=console, json_mode=get_json_mode())
        out.success("Generated 3 IDs", ids=ids)
        out.table("Presets", ["Key", "Class"], rows, data_key="presets")
        raise typer.Exit(out.finish())
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, PrivateAttr, ConfigDict
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.errors import (
    ConfigurationError,
    ConfigurationResolutionError,
    DictionaryLoadError,
    SemanticIDError,
    UnsupportedSchemaFormatError,
)


class ExitCode:
    """Standardized exit codes for CLI commands.

        0 = Success
        1 = Validation error (invalid ID, concept name or input)
        2 = Usage error (reported by Typer itself)
        3 = File not found
        4 = Configuration error (bad configuration, unknown preset, unresolvable layout)
        5 = Generation error (passphrase word lists unavailable)
        6 = Schema error
    """

    SUCCESS = 0
    VALIDATION_ERROR = 1
    USAGE_ERROR = 2
    FILE_NOT_FOUND = 3
    CONFIGURATION_ERROR = 4
    GENERATION_ERROR = 5
    SCHEMA_ERROR = 6


def exit_code_for(exc: SemanticIDError) -> int:
    """Map a library error to the exit code reported for it."""
    if isinstance(exc, UnsupportedSchemaFormatError):
        return ExitCode.SCHEMA_ERROR
    if isinstance(exc, (ConfigurationError, ConfigurationResolutionError)):
        return ExitCode.CONFIGURATION_ERROR
    if isinstance(exc, DictionaryLoadError):
        return ExitCode.GENERATION_ERROR
    return ExitCode.VALIDATION_ERROR


class Output(BaseModel):
    """Dual-mode output for CLI commands.

    Human mode prints through the shared Rich console as it goes; JSON
    mode collects everything and prints one document from finish().
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    console: Console
    json_mode: bool = False

    _data: dict[str, Any] = PrivateAttr()
    _exit_code: int = PrivateAttr(default=ExitCode.SUCCESS)

    def model_post_init(self, __context: Any) -> None:
        self._data = {"status": "success", "errors": []}

    def success(self, message: str, **data: Any) -> None:
        if self.json_mode:
            self._data.update(data)
        else:
            self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(
        self,
        message: str,
        *,
        category: str | None = None,
        exit_code: int = ExitCode.VALIDATION_ERROR,
    ) -> None:
        """Record an error; the exit code of the last error wins."""
        self._exit_code = exit_code
        self._data["status"] = "error"
        if self.json_mode:
            error_obj: dict[str, Any] = {"message": message}
            if category:
                error_obj["category"] = category
            self._data["errors"].append(error_obj)
        else:
            self.console.print(f"[red]✗[/red] {escape(message)}")

    def fail(self, exc: SemanticIDError) -> None:
        """Report a library error with its category and exit code."""
        self.error(str(exc), category=type(exc).__name__, exit_code=exit_code_for(exc))

    def raw(self, value: str) -> None:
        """Print a value verbatim, without markup or wrapping (human mode only)."""
        if not self.json_mode:
            self.console.print(value, markup=False, highlight=False, soft_wrap=True)

    def blank(self) -> None:
        if not self.json_mode:
            self.console.print()

    def table(self, title: str, columns: list[str], rows: list[list[str]], *, data_key: str) -> None:
        """Print a Rich table, or store rows as dicts under data_key in JSON mode."""
        if self.json_mode:
            self._data[data_key] = [dict(zip(columns, row)) for row in rows]
            return
        table = Table(title=title, show_header=True, header_style="bold")
        for col in columns:
            table.add_column(col)
        for row in rows:
            table.add_row(*(escape(str(cell)) for cell in row))
        self.console.print(table)

    def set_data(self, key: str, value: Any) -> None:
        self._data[key] = value

    def finish(self) -> int:
        """Print the JSON document (JSON mode) and return the exit code for typer.Exit."""
        if self.json_mode:
            self._data["exit_code"] = self._exit_code
            print(json.dumps(self._data, indent=2, default=str, ensure_ascii=False))
        return self._exit_code
