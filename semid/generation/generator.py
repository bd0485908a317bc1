"""Semantic ID generator.

Assembles `<concept><data concept separator><seg1><compartment separator>...<segN>`
by running each compartment's strategy in order.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..core.errors import InvalidConceptNameError
from ..core.models import IDConfiguration
from ..core.normalizer import normalize_configuration
from ..passphrase import PassphraseDictionaryCache
from .strategies import StrategyContext, get_strategy, is_supported_strategy

logger = logging.getLogger(__name__)


class SemanticIDGenerator:
    """Generates semantic IDs for one resolved configuration.

    The configuration is normalized once, at construction, so a bad
    configuration fails here rather than on the first generate() call.

    Example:
        >>> generator = SemanticIDGenerator({"preset": "invoice"})
        >>> generator.generate("invoice")
        'invoice|k#9Q-48213377-3fa9...'
    """

    def __init__(
        self,
        configuration: Mapping[str, Any] | IDConfiguration | None = None,
        *,
        dictionaries: PassphraseDictionaryCache | None = None,
        presets=None,
    ):
        self._configuration = normalize_configuration(
            configuration,
            strategy_resolver=is_supported_strategy,
            presets=presets,
        )
        self._context = StrategyContext.from_configuration(self._configuration, dictionaries)

    @property
    def configuration(self) -> IDConfiguration:
        return self._configuration

    def generate(self, concept_name: str) -> str:
        """Generate one semantic ID for concept_name.

        Raises:
            InvalidConceptNameError: If concept_name is not a non-empty string
        """
        if not isinstance(concept_name, str) or not concept_name:
            raise InvalidConceptNameError(
                "Invalid data concept name. It should be a non-empty string."
            )

        config = self._configuration
        segments = [
            get_strategy(compartment.generation_strategy)(compartment.length, self._context)
            for compartment in config.compartments
        ]
        semantic_id = (
            concept_name
            + config.data_concept_separator
            + config.compartment_separator.join(segments)
        )
        logger.debug("Generated semantic ID for %r (%d segments)", concept_name, len(segments))
        return semantic_id

    generate_semantic_id = generate

    def generate_many(self, concept_name: str, count: int) -> list[str]:
        """Generate `count` independent IDs for the same concept."""
        return [self.generate(concept_name) for _ in range(count)]


def generate_semantic_id(
    concept_name: str,
    configuration: Mapping[str, Any] | IDConfiguration | None = None,
    *,
    dictionaries: PassphraseDictionaryCache | None = None,
) -> str:
    """One-shot convenience wrapper around SemanticIDGenerator."""
    return SemanticIDGenerator(configuration, dictionaries=dictionaries).generate(concept_name)
