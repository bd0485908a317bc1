"""Domain preset catalog.

Presets bundle a compartment layout for frequently requested business
concepts so teams can issue consistent IDs without writing a
configuration. All presets currently share the same layout and differ
only in their metadata.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ..core.errors import UnknownPresetError
from ..core.models import PresetMetadata

logger = logging.getLogger(__name__)


_PRESET_SEPARATORS = {
    "data_concept_separator": "|",
    "compartment_separator": "-",
}

_PRESET_COMPARTMENTS: list[dict[str, Any]] = [
    {"name": "semantic_prefix", "length": 4, "generation_strategy": "visible characters"},
    {"name": "numeric_core", "length": 8, "generation_strategy": "numbers"},
    {"name": "semantic_suffix", "length": 24, "generation_strategy": "hexadecimal"},
]


@dataclass(frozen=True)
class _PresetDefinition:
    key: str
    schema_name: str
    schema_class: str
    description: str


# Order matters: auto-detection in the inspector scans presets in this order.
_DEFINITIONS: tuple[_PresetDefinition, ...] = (
    _PresetDefinition("person", "Person", "schema:Person", "Unique identifier for an individual person record."),
    _PresetDefinition("individual_customer", "IndividualCustomer", "schema:Person", "Semantic identifier for a customer who is a natural person."),
    _PresetDefinition("corporate_customer", "CorporateCustomer", "schema:Organization", "Semantic identifier for a customer that is a legal entity."),
    _PresetDefinition("employee", "Employee", "schema:Person", "Tracks employees across HR and workforce systems."),
    _PresetDefinition("supplier", "Supplier", "schema:Organization", "Identifiers for vendors or suppliers fulfilling goods and services."),
    _PresetDefinition("partner", "Partner", "schema:Organization", "Identifiers for strategic or channel partners."),
    _PresetDefinition("organization", "Organization", "schema:Organization", "Generic organization identifiers covering any legal entity."),
    _PresetDefinition("department", "Department", "schema:Organization", "Identifiers for internal cost centers, teams, or departments."),
    _PresetDefinition("role", "Role", "schema:Role", "Identifiers for functional or security roles assigned to people."),
    _PresetDefinition("product", "Product", "schema:Product", "Product catalog identifiers spanning physical or digital goods."),
    _PresetDefinition("product_category", "ProductCategory", "schema:CategoryCodeSet", "Identifiers for product category taxonomies."),
    _PresetDefinition("device", "Device", "schema:Product", "Identifiers for physical or IoT devices."),
    _PresetDefinition("asset", "Asset", "schema:Product", "Identifiers for tracked assets such as equipment or licenses."),
    _PresetDefinition("inventory_item", "InventoryItem", "schema:Product", "Identifiers for inventory instances across warehouses."),
    _PresetDefinition("contract", "Contract", "schema:Contract", "Identifiers for legal agreements and contracts."),
    _PresetDefinition("order", "Order", "schema:Order", "Identifiers for customer or internal orders."),
    _PresetDefinition("purchase_order", "PurchaseOrder", "schema:Order", "Identifiers for procurement purchase orders."),
    _PresetDefinition("invoice", "Invoice", "schema:Invoice", "Accounts receivable or payable invoice identifiers."),
    _PresetDefinition("shipment", "Shipment", "schema:ParcelDelivery", "Logistics shipment identifiers for parcels or freight."),
    _PresetDefinition("payment_transaction", "PaymentTransaction", "schema:PaymentService", "Identifiers for settlement or payment transactions."),
    _PresetDefinition("financial_account", "FinancialAccount", "schema:FinancialProduct", "Identifiers for bank, wallet, or ledger accounts."),
    _PresetDefinition("budget", "Budget", "schema:FinancialProduct", "Identifiers for budget envelopes or funding allocations."),
    _PresetDefinition("project", "Project", "schema:Project", "Identifiers for initiatives or projects."),
    _PresetDefinition("task", "Task", "schema:Action", "Identifiers for tasks or work items."),
    _PresetDefinition("support_case", "SupportCase", "schema:Action", "Identifiers for customer or internal support cases."),
    _PresetDefinition("document", "Document", "schema:CreativeWork", "Identifiers for documents, records, or files."),
    _PresetDefinition("policy_document", "PolicyDocument", "schema:CreativeWork", "Identifiers for policies, standards, or compliance docs."),
    _PresetDefinition("location", "Location", "schema:Place", "Identifiers for physical or logical locations."),
    _PresetDefinition("event", "Event", "schema:Event", "Identifiers for calendar, marketing, or operational events."),
    _PresetDefinition("dataset", "Dataset", "schema:Dataset", "Identifiers for analytical or operational datasets."),
)


class PresetCatalog:
    """Read-only preset provider.

    Every accessor hands out copies, so callers may mutate what they get
    back without affecting the catalog or other callers.
    """

    def __init__(self, definitions: tuple[_PresetDefinition, ...] = _DEFINITIONS):
        self._configurations: dict[str, dict[str, Any]] = {}
        self._metadata: dict[str, PresetMetadata] = {}
        for definition in definitions:
            self._configurations[definition.key] = {
                **_PRESET_SEPARATORS,
                "compartments": copy.deepcopy(_PRESET_COMPARTMENTS),
            }
            self._metadata[definition.key] = PresetMetadata(
                key=definition.key,
                schema_name=definition.schema_name,
                label=definition.schema_name,
                description=definition.description,
                schema_class=definition.schema_class,
            )

    def _require(self, name: Any) -> str:
        if not isinstance(name, str):
            raise UnknownPresetError("Preset name must be a string.")
        if name not in self._configurations:
            raise UnknownPresetError(f"Unknown domain preset: {name}")
        return name

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._configurations

    def names(self) -> list[str]:
        """Preset keys in catalog order."""
        return list(self._configurations)

    def get(self, name: str) -> dict[str, Any]:
        """Base configuration of a preset, as a fresh dict."""
        return copy.deepcopy(self._configurations[self._require(name)])

    def metadata(self, name: str) -> PresetMetadata:
        return self._metadata[self._require(name)].model_copy()

    def resolve(
        self, name: str, overrides: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Preset configuration with caller overrides applied (shallow merge).

        A caller-supplied compartments list replaces the preset's entirely.
        """
        resolved = self.get(name)
        for key, value in (overrides or {}).items():
            if value is None:
                continue
            resolved[key] = copy.deepcopy(value)
        logger.debug("Resolved preset %s with overrides %s", name, sorted(overrides or {}))
        return resolved

    def separator_hints(self) -> list[tuple[str, str]]:
        """(preset key, data concept separator) pairs used for auto-detection."""
        return [
            (key, config["data_concept_separator"])
            for key, config in self._configurations.items()
        ]


_catalog: PresetCatalog | None = None


def get_catalog() -> PresetCatalog:
    """Get the process-wide preset catalog."""
    global _catalog
    if _catalog is None:
        _catalog = PresetCatalog()
    return _catalog


def list_domain_presets() -> list[str]:
    return get_catalog().names()


def get_domain_preset(name: str) -> dict[str, Any]:
    return get_catalog().get(name)


def get_preset_metadata(name: str) -> PresetMetadata:
    return get_catalog().metadata(name)


def resolve_preset_configuration(
    name: str, overrides: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    return get_catalog().resolve(name, overrides)
