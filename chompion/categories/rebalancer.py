from __future__ import annotations

import logging
import uuid
from decimal import Decimal
from typing import Iterable

from ..entries import store
from ..entries.models import RatingCategory
from ..errors import NotFoundError
from ..scoring.weights import WeightCollection
from .config import DEFAULT_CATEGORY_CONFIG, CategoryConfig

logger = logging.getLogger(__name__)


class WeightRebalancer:
    """Edit session over one category set.

    Adding or removing a category redistributes every weight evenly so the
    set stays complete. Manual weight edits are taken as-is and only checked
    when the set is committed. Committing never rescores entries; that is
    ``bulk_recompute``'s job and has to be asked for separately.
    """

    def __init__(self, categories: Iterable[RatingCategory] = ()) -> None:
        self._weights = WeightCollection.from_categories(categories)

    @classmethod
    def from_store(cls) -> WeightRebalancer:
        return cls(store.get_categories())

    @property
    def weights(self) -> WeightCollection:
        return self._weights

    def _require(self, category_id: str) -> None:
        try:
            self._weights.index_of(category_id)
        except KeyError:
            raise NotFoundError("category", category_id) from None

    def add(self, name: str) -> WeightCollection:
        appended = self._weights.append(name, category_id=uuid.uuid4().hex)
        self._weights = appended.distribute_evenly()
        return self._weights

    def remove(self, category_id: str) -> WeightCollection:
        self._require(category_id)
        self._weights = self._weights.without(category_id).distribute_evenly()
        return self._weights

    def rename(self, category_id: str, name: str) -> WeightCollection:
        self._require(category_id)
        self._weights = self._weights.with_item(category_id, name=name)
        return self._weights

    def set_weight(self, category_id: str, percent: int) -> WeightCollection:
        self._require(category_id)
        self._weights = self._weights.with_item(category_id, percent=percent)
        return self._weights

    def commit(self) -> list[RatingCategory]:
        """Validate and persist the set with fractional weights."""
        self._weights.validate()
        categories = [
            RatingCategory(
                id=item.category_id or uuid.uuid4().hex,
                name=item.name.strip(),
                weight=Decimal(item.percent) / 100,
                sort_order=i,
            )
            for i, item in enumerate(self._weights)
        ]
        store.save_categories(categories)
        self._weights = WeightCollection.from_categories(categories)
        logger.info("Committed %d rating categories: %s", len(categories), self._weights.percents)
        return categories


def seed_default_categories(config: CategoryConfig = DEFAULT_CATEGORY_CONFIG) -> list[RatingCategory]:
    rebalancer = WeightRebalancer()
    for name in config.default_categories:
        rebalancer.add(name)
    return rebalancer.commit()
