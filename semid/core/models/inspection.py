"""Inspection report models.

Reports are created fresh for every inspect() call and never mutated
afterwards. Compartment-level problems live in `issues` lists instead of
being raised, so one bad compartment does not hide the others.
"""

from typing import Any

from pydantic import BaseModel, Field

from .configuration import GenerationStrategy


class PresetMetadata(BaseModel):
    """Descriptive record attached to a domain preset."""

    key: str
    schema_name: str
    label: str
    description: str
    schema_class: str


class ConfigurationSummary(BaseModel):
    """The parts of the resolved configuration echoed back in a report."""

    data_concept_separator: str
    compartment_separator: str
    language_code: str | None = None
    compartment_count: int


class CompartmentReport(BaseModel):
    """Diagnostics for one compartment of an inspected ID."""

    name: str
    position: int
    expected_length: int
    generation_strategy: GenerationStrategy
    value: str
    is_valid: bool
    issues: list[str] = Field(default_factory=list)


class InspectionReport(BaseModel):
    """Structured validity report for a candidate semantic ID."""

    semantic_id: str
    data_concept_name: str
    preset: str | None = None
    metadata: PresetMetadata | None = None
    configuration: ConfigurationSummary
    is_valid: bool
    issues: list[str] = Field(default_factory=list)
    compartments: list[CompartmentReport] = Field(default_factory=list)

    @property
    def all_issues(self) -> list[str]:
        """Global issues followed by compartment issues prefixed with the compartment name."""
        flattened = list(self.issues)
        for compartment in self.compartments:
            flattened.extend(f"{compartment.name}: {issue}" for issue in compartment.issues)
        return flattened

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
