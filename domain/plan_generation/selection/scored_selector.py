"""ScoredSelector - pick catalog items closest to a target attribute vector.

Generic over any catalog item exposing ``name`` and ``attributes()``, so
exercise and meal selection share one implementation.
"""

import logging
import random
from typing import AbstractSet, Mapping, Optional, Sequence, TypeVar

from ..core.entities.catalog_item import CatalogItem

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=CatalogItem)

# Relative importance of each attribute; unknown attributes weigh 1.0
DEFAULT_WEIGHTS: Mapping[str, float] = {
    "calories": 3.0,
    "protein": 2.0,
    "carbs": 1.0,
    "fats": 1.0,
    "fiber": 0.5,
    "sets": 1.0,
    "rest_seconds": 0.5,
}

# A candidate scores zero on an attribute once it is 20% away from target
TOLERANCE = 0.2


def candidate_pool(catalog: Sequence[T], excluded: AbstractSet[str]) -> list[T]:
    """Catalog minus excluded names; the full catalog once that is empty.

    The second case is the repetition fallback: it is logged, not raised.
    """
    pool = [item for item in catalog if item.name not in excluded]
    if pool:
        return pool

    logger.warning(
        "Catalog exhausted, allowing repeated items",
        extra={"catalog_size": len(catalog), "excluded": len(excluded)},
    )
    return list(catalog)


def attribute_score(candidate_value: float, target_value: float) -> float:
    """Closeness of one attribute: 1 at the target, 0 beyond the tolerance."""
    if target_value == 0:
        return 1.0 if candidate_value == 0 else 0.0
    return max(0.0, 1.0 - abs(candidate_value - target_value) / (TOLERANCE * target_value))


def score(
    item: CatalogItem,
    target: Mapping[str, float],
    weights: Optional[Mapping[str, float]] = None,
) -> float:
    """Weighted sum of attribute closeness over the target's attributes."""
    weights = DEFAULT_WEIGHTS if weights is None else weights
    values = item.attributes()
    return sum(
        weights.get(attribute, 1.0) * attribute_score(values.get(attribute, 0.0), wanted)
        for attribute, wanted in target.items()
    )


class ScoredSelector:
    """Select catalog items against a target vector with repeat avoidance.

    Example:
        >>> selector = ScoredSelector()
        >>> meal = selector.select(
        ...     catalog=breakfasts,
        ...     target={"calories": 450, "protein": 30},
        ...     excluded={"Oatmeal with Berries"},
        ... )
    """

    def __init__(self, weights: Optional[Mapping[str, float]] = None):
        self._weights = dict(DEFAULT_WEIGHTS if weights is None else weights)

    def select(
        self,
        catalog: Sequence[T],
        target: Mapping[str, float],
        excluded: AbstractSet[str] = frozenset(),
    ) -> T:
        """
        Return the best-scoring candidate.

        Ties go to the first occurrence in catalog order.

        Raises:
            ValueError: If the catalog is empty
        """
        if not catalog:
            raise ValueError("Cannot select from an empty catalog")

        # max() keeps the first of equally scored items
        return max(
            candidate_pool(catalog, excluded),
            key=lambda item: score(item, target, self._weights),
        )

    def pick_random(
        self,
        catalog: Sequence[T],
        excluded: AbstractSet[str],
        rng: random.Random,
    ) -> T:
        """
        Uniform choice among non-excluded candidates.

        Used where slots are filled by count rather than by a target
        vector (workout days).

        Raises:
            ValueError: If the catalog is empty
        """
        if not catalog:
            raise ValueError("Cannot select from an empty catalog")
        return rng.choice(candidate_pool(catalog, excluded))
