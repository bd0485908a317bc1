"""Inspect command: validate a semantic ID and explain the result."""

from pathlib import Path

import typer

from ...core.errors import SemanticIDError
from ...inspection import SemanticIDInspector
from ..app import app, console, get_json_mode
from ..display import display_inspection_report
from ..utils import ExitCode, Output
from .generate import build_configuration


@app.command("inspect")
def inspect_command(
    semantic_id: str = typer.Argument(..., help="Semantic ID to inspect"),
    preset: str | None = typer.Option(
        None, "--preset", "-p", help="Validate against this preset (default: auto-detect)"
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML or JSON configuration file to validate against",
        exists=True,
        dir_okay=False,
    ),
):
    """Inspect a semantic ID against a preset or configuration.

    Without --preset or --config the preset is detected from the ID's
    concept prefix. Exits with code 1 when the ID is invalid.

    Examples:
        semid inspect "invoice|a1b2-12345678-0123456789abcdef01234567"
        semid inspect "session|appleapple" --config passphrase.yaml
    """
    out = Output(console=console, json_mode=get_json_mode())

    try:
        overrides = None
        if preset or config_file:
            overrides = build_configuration(preset, config_file, None)
        report = SemanticIDInspector().inspect(semantic_id, overrides)
    except SemanticIDError as exc:
        out.fail(exc)
        raise typer.Exit(out.finish())

    out.set_data("report", report.to_dict())
    if not out.json_mode:
        display_inspection_report(report)
        out.blank()

    if report.is_valid:
        out.success("Semantic ID is valid")
    else:
        out.error(
            f"Semantic ID is invalid ({len(report.all_issues)} issue(s))",
            exit_code=ExitCode.VALIDATION_ERROR,
        )
    raise typer.Exit(out.finish())
