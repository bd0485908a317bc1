"""Schema command: export JSON-LD / OWL descriptions of presets."""

from pathlib import Path

import typer

from ...core.errors import SemanticIDError
from ...schema import SCHEMA_FORMATS, export_schema, render_schema, write_schema_artifacts
from ..app import app, console, get_json_mode
from ..utils import ExitCode, Output


@app.command("schema")
def schema_command(
    name: str | None = typer.Argument(None, help="Preset key to export"),
    format: str = typer.Option(
        "jsonld", "--format", "-f", help=f"Schema format: {', '.join(SCHEMA_FORMATS)}"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output file (or directory with --all)"
    ),
    all_presets: bool = typer.Option(
        False, "--all", help="Export every preset in every format into --output"
    ),
):
    """Export the schema of a domain preset.

    Examples:
        semid schema person
        semid schema invoice --format owl -o invoice.owl
        semid schema --all -o schemas/
    """
    out = Output(console=console, json_mode=get_json_mode())

    if all_presets:
        if output is None:
            out.error("--all requires --output DIRECTORY", exit_code=ExitCode.USAGE_ERROR)
            raise typer.Exit(out.finish())
        try:
            written = write_schema_artifacts(output)
        except SemanticIDError as exc:
            out.fail(exc)
            raise typer.Exit(out.finish())
        out.success(
            f"Wrote {len(written)} schema files to {output}",
            files=[str(path) for path in written],
        )
        raise typer.Exit(out.finish())

    if name is None:
        out.error("Provide a preset name or --all", exit_code=ExitCode.USAGE_ERROR)
        raise typer.Exit(out.finish())

    try:
        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(render_schema(name, format), encoding="utf-8")
            out.success(f"Wrote {format} schema for {name} to {output}", path=str(output))
        elif out.json_mode:
            out.set_data("schema", export_schema(name, format))
        else:
            typer.echo(render_schema(name, format).rstrip("\n"))
    except SemanticIDError as exc:
        out.fail(exc)
    raise typer.Exit(out.finish())
