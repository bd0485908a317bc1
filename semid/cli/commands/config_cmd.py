"""Config command for viewing and managing semid configuration."""

import typer

from ..app import app, console, get_json_mode
from ..utils import Output
from ...config import (
    get_config,
    reset_config,
    CONFIG_FILE,
)
from ...presets import get_catalog


VALID_KEYS = {
    "defaults.preset",
    "defaults.language_code",
    "defaults.count",
}

INT_FIELDS = {
    "count",
}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. defaults.preset, defaults.count)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify semid configuration.

    Examples:
        semid config show
        semid config set defaults.preset invoice
        semid config set defaults.language_code fra
        semid config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] semid config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {action}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    if get_json_mode():
        out = Output(console=console, json_mode=True)
        out.set_data("config", config.to_dict())
        out.set_data("config_file", str(CONFIG_FILE))
        raise typer.Exit(out.finish())

    console.print()
    console.print("[bold]semid Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Defaults[/bold cyan]")
    console.print(f"  preset        = {config.defaults.preset or '[dim](built-in layout)[/dim]'}")
    console.print(
        f"  language_code = {config.defaults.language_code or '[dim](all languages)[/dim]'}"
    )
    console.print(f"  count         = {config.defaults.count}")

    console.print()
    if CONFIG_FILE.exists():
        console.print(f"Config file: {CONFIG_FILE}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({CONFIG_FILE})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {key}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    config = get_config()
    _, field_name = key.split(".", 1)

    if field_name == "preset" and value and value not in get_catalog():
        console.print(f"[red]Unknown preset:[/red] {value}")
        console.print("Run `semid presets list` to see available presets.")
        raise typer.Exit(1)

    # Type coercion
    if field_name in INT_FIELDS:
        try:
            parsed = int(value)
        except ValueError:
            console.print(f"[red]Invalid integer value:[/red] {value}")
            raise typer.Exit(1)
        if parsed < 1:
            console.print(f"[red]Value must be at least 1:[/red] {value}")
            raise typer.Exit(1)
        setattr(config.defaults, field_name, parsed)
    else:
        setattr(config.defaults, field_name, value)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads

    console.print(f"[green]✓[/green] Set {key} = {value}")
    console.print(f"  Saved to {CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {CONFIG_FILE}")
    else:
        console.print("Config already at defaults (no config file exists)")
