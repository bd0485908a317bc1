"""Display helpers for CLI output."""

from rich.markup import escape
from rich.table import Table

from ..core.models import IDConfiguration, InspectionReport, PresetMetadata
from .app import console


def _status(valid: bool) -> str:
    return "[green]✓ valid[/green]" if valid else "[red]✗ invalid[/red]"


def display_configuration(configuration: IDConfiguration, title: str = "Layout") -> None:
    """Display separators and compartments of a configuration."""
    console.print(
        f"[bold]Separators:[/bold] concept {escape(repr(configuration.data_concept_separator))}"
        f"  compartment {escape(repr(configuration.compartment_separator))}"
    )
    if configuration.language_code:
        console.print(f"[bold]Language:[/bold] {escape(configuration.language_code)}")

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Length", justify="right")
    table.add_column("Strategy")
    for position, compartment in enumerate(configuration.compartments):
        table.add_row(
            str(position),
            escape(compartment.name),
            str(compartment.length),
            compartment.generation_strategy.value,
        )
    console.print(table)


def display_preset_metadata(metadata: PresetMetadata) -> None:
    console.print()
    console.print(f"[bold cyan]{escape(metadata.label)}[/bold cyan] ({escape(metadata.key)})")
    console.print(f"  {escape(metadata.description)}")
    console.print(f"  [dim]class:[/dim] {escape(metadata.schema_class)}")
    console.print()


def display_inspection_report(report: InspectionReport) -> None:
    """Display an inspection report: verdict, global issues, compartment table."""
    console.print()
    console.print(f"[bold]Semantic ID:[/bold] {escape(report.semantic_id)}", soft_wrap=True)
    console.print(f"[bold]Concept:[/bold] {escape(report.data_concept_name) or '[dim](none)[/dim]'}")
    if report.metadata:
        console.print(
            f"[bold]Preset:[/bold] {escape(report.metadata.key)} "
            f"[dim]({escape(report.metadata.schema_class)})[/dim]"
        )
    console.print(f"[bold]Status:[/bold] {_status(report.is_valid)}")

    if report.issues:
        console.print()
        for issue in report.issues:
            console.print(f"  [red]•[/red] {escape(issue)}")

    table = Table(title="Compartments", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Strategy")
    table.add_column("Length", justify="right")
    table.add_column("Value")
    table.add_column("Status")
    table.add_column("Issues")
    for compartment in report.compartments:
        table.add_row(
            str(compartment.position),
            escape(compartment.name),
            compartment.generation_strategy.value,
            str(compartment.expected_length),
            escape(compartment.value),
            _status(compartment.is_valid),
            escape("\n".join(compartment.issues)),
        )
    console.print()
    console.print(table)
