"""Generate command: issue new semantic IDs."""

from pathlib import Path
from typing import Any

import typer

from ...config import get_config
from ...core.errors import SemanticIDError
from ...core.normalizer import load_configuration_file
from ...generation import SemanticIDGenerator
from ..app import app, console, get_json_mode
from ..utils import Output


def build_configuration(
    preset: str | None,
    config_file: Path | None,
    language: str | None,
    default_preset: str = "",
    default_language: str = "",
) -> dict[str, Any]:
    """Combine command line options and tool defaults into a configuration mapping.

    A --config file is the base; --preset and --language override it. Tool
    defaults only apply when neither a file nor the matching flag is given.
    """
    if config_file is not None:
        data = load_configuration_file(config_file).to_dict()
    else:
        data = {}
        preset = preset or default_preset or None

    if preset:
        data["preset"] = preset
    language = language or (default_language if "language_code" not in data else None)
    if language:
        data["language_code"] = language
    return data


@app.command("generate")
def generate_command(
    concept: str = typer.Argument(..., help="Data concept name (e.g. person, invoice)"),
    preset: str | None = typer.Option(
        None, "--preset", "-p", help="Domain preset to use (see `semid presets list`)"
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML or JSON configuration file",
        exists=True,
        dir_okay=False,
    ),
    language: str | None = typer.Option(
        None, "--language", "-l", help="Passphrase language code (e.g. eng, fra)"
    ),
    count: int | None = typer.Option(
        None, "--count", "-n", min=1, help="Number of IDs to generate"
    ),
):
    """Generate semantic IDs for a data concept.

    Examples:
        semid generate person
        semid generate invoice --preset invoice --count 5
        semid generate session --config layout.yaml --language fra
    """
    out = Output(console=console, json_mode=get_json_mode())
    defaults = get_config().defaults

    try:
        configuration = build_configuration(
            preset,
            config_file,
            language,
            default_preset=defaults.preset,
            default_language=defaults.language_code,
        )
        generator = SemanticIDGenerator(configuration)
        ids = generator.generate_many(concept, count or max(defaults.count, 1))
    except SemanticIDError as exc:
        out.fail(exc)
        raise typer.Exit(out.finish())

    out.set_data("ids", ids)
    out.set_data("configuration", generator.configuration.to_dict())
    for semantic_id in ids:
        out.raw(semantic_id)
    raise typer.Exit(out.finish())
