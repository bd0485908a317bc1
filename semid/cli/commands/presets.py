"""Presets commands: browse the domain preset catalog."""

import typer

from ...core.errors import SemanticIDError
from ...core.normalizer import normalize_configuration
from ...presets import get_catalog
from ..app import app, console, get_json_mode
from ..display import display_configuration, display_preset_metadata
from ..utils import Output

presets_app = typer.Typer(help="Browse domain presets", no_args_is_help=True)
app.add_typer(presets_app, name="presets")


@presets_app.command("list")
def presets_list(
    show_config: bool = typer.Option(
        False, "--show-config", help="Include each preset's compartment layout"
    ),
):
    """List the available domain presets."""
    out = Output(console=console, json_mode=get_json_mode())
    catalog = get_catalog()

    columns = ["Key", "Schema", "Class", "Description"]
    if show_config:
        columns.append("Layout")

    rows = []
    for key in catalog.names():
        metadata = catalog.metadata(key)
        row = [key, metadata.schema_name, metadata.schema_class, metadata.description]
        if show_config:
            layout = normalize_configuration({"preset": key})
            row.append(
                ", ".join(
                    f"{c.name}:{c.length}:{c.generation_strategy.value}"
                    for c in layout.compartments
                )
            )
        rows.append(row)

    out.table(f"Domain presets ({len(rows)})", columns, rows, data_key="presets")
    raise typer.Exit(out.finish())


@presets_app.command("show")
def presets_show(
    name: str = typer.Argument(..., help="Preset key (e.g. person, invoice)"),
):
    """Show one preset's metadata and layout."""
    out = Output(console=console, json_mode=get_json_mode())

    try:
        metadata = get_catalog().metadata(name)
        configuration = normalize_configuration({"preset": name})
    except SemanticIDError as exc:
        out.fail(exc)
        raise typer.Exit(out.finish())

    out.set_data("metadata", metadata.model_dump())
    out.set_data("configuration", configuration.to_dict())
    if not out.json_mode:
        display_preset_metadata(metadata)
        display_configuration(configuration)
    raise typer.Exit(out.finish())
