"""
Category weight sets.

Weights are edited as integer percentages that must add up to exactly 100
before a set can be committed. Scoring works on the fractional form
(``percent / 100``).
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Iterable, Iterator, Sequence

from ..entries.models import RatingCategory
from ..errors import InvalidWeightSet, ValidationError
from .rounding import round_half_up, to_decimal

FULL_SET = 100


def even_split(n: int) -> list[int]:
    """Split 100 into ``n`` integer shares; the first ``100 % n`` get one extra."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return []
    base, remainder = divmod(FULL_SET, n)
    return [base + (1 if i < remainder else 0) for i in range(n)]


@dataclass(frozen=True)
class CategoryWeight:
    name: str
    percent: int
    category_id: str | None = None

    @property
    def key(self) -> str:
        return self.category_id or self.name


@dataclass(frozen=True)
class WeightCollection:
    items: tuple[CategoryWeight, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, int]]) -> WeightCollection:
        return cls(tuple(CategoryWeight(name=name, percent=percent) for name, percent in pairs))

    @classmethod
    def from_categories(cls, categories: Iterable[RatingCategory]) -> WeightCollection:
        ordered = sorted(categories, key=lambda c: c.sort_order)
        return cls(tuple(
            CategoryWeight(
                name=c.name,
                percent=int(round_half_up(to_decimal(c.weight) * 100, 0)),
                category_id=c.id,
            )
            for c in ordered
        ))

    def __iter__(self) -> Iterator[CategoryWeight]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def names(self) -> list[str]:
        return [item.name for item in self.items]

    @property
    def percents(self) -> list[int]:
        return [item.percent for item in self.items]

    @property
    def total(self) -> int:
        return sum(self.percents)

    def is_complete(self) -> bool:
        return self.total == FULL_SET

    def distribute_evenly(self) -> WeightCollection:
        shares = even_split(len(self.items))
        return WeightCollection(tuple(
            replace(item, percent=share) for item, share in zip(self.items, shares)
        ))

    def index_of(self, key: str) -> int:
        for i, item in enumerate(self.items):
            if item.key == key:
                return i
        raise KeyError(key)

    def append(self, name: str, category_id: str | None = None) -> WeightCollection:
        return WeightCollection(self.items + (CategoryWeight(name, 0, category_id),))

    def without(self, key: str) -> WeightCollection:
        i = self.index_of(key)
        return WeightCollection(self.items[:i] + self.items[i + 1:])

    def with_item(self, key: str, **changes: object) -> WeightCollection:
        i = self.index_of(key)
        updated = replace(self.items[i], **changes)
        return WeightCollection(self.items[:i] + (updated,) + self.items[i + 1:])

    def validate(self) -> None:
        """Raise unless the set is fit to persist."""
        problems: list[str] = []
        seen: set[str] = set()
        for item in self.items:
            name = item.name.strip()
            if not name:
                problems.append("category name must not be empty")
            elif name in seen:
                problems.append(f"duplicate category name {name!r}")
            seen.add(name)
            if isinstance(item.percent, bool) or not isinstance(item.percent, int):
                problems.append(f"weight for {item.name!r} must be a whole percentage")
            elif not 0 <= item.percent <= FULL_SET:
                problems.append(f"weight for {item.name!r} must be between 0 and 100")
        if problems:
            raise ValidationError(*problems)
        if not self.is_complete():
            raise InvalidWeightSet(f"weights add up to {self.total}%, expected 100%")

    def fractions(self) -> dict[str, Decimal]:
        return {item.key: Decimal(item.percent) / 100 for item in self.items}


def fraction_total(categories: Sequence[RatingCategory]) -> Decimal:
    return sum((to_decimal(c.weight) for c in categories), Decimal("0"))


def check_fraction_total(categories: Sequence[RatingCategory], tolerance: float) -> None:
    """Fractional weights of a complete set must sum to 1 within ``tolerance``."""
    total = fraction_total(categories)
    if abs(total - 1) > to_decimal(tolerance):
        raise InvalidWeightSet(f"category weights add up to {total}, expected 1.0")
