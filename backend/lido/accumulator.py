"""Running breakdown totals for a single pricing pass."""

from __future__ import annotations

from typing import TypeVar

from lido.exceptions import BreakdownError
from lido.models.breakdown import (
    Breakdown,
    EntranceTotals,
    Flat,
    PerPeriod,
    PerRow,
    Totals,
)
from lido.models.rows import RowId

T = TypeVar("T", bound=Totals)
E = TypeVar("E", PerPeriod, PerRow)


def merge_totals(existing: T | None, values: T) -> T:
    """Fold ``values`` into ``existing``.

    ``days`` and ``total_price`` are summed; every other field (unit price,
    entrance count) takes the newer value.
    """
    if existing is None:
        return values.model_copy()
    return values.model_copy(
        update={
            "days": existing.days + values.days,
            "total_price": existing.total_price + values.total_price,
        }
    )


class BreakdownAccumulator:
    """Collects contributions keyed by category or section name.

    The entry kind for a key is fixed by the first write; writing the same
    key with another kind raises BreakdownError.
    """

    def __init__(self) -> None:
        self._entries: dict[str, PerPeriod | PerRow | Flat] = {}

    def add_to_period(self, key: str, period_id: int, values: Totals) -> None:
        entry = self._container(key, PerPeriod)
        entry.periods[period_id] = merge_totals(entry.periods.get(period_id), values)

    def add_to_row(self, key: str, row_id: RowId, values: EntranceTotals) -> None:
        entry = self._container(key, PerRow)
        entry.rows[row_id] = merge_totals(entry.rows.get(row_id), values)

    def add_flat(self, key: str, values: Totals) -> None:
        existing = self._entries.get(key)
        if existing is not None and not isinstance(existing, Flat):
            raise BreakdownError(_kind_clash(key, existing, Flat))
        previous = existing.totals if existing is not None else None
        self._entries[key] = Flat(totals=merge_totals(previous, values))

    def set_flat(self, key: str, values: Totals) -> None:
        """Write a flat entry, replacing whatever the key held."""
        existing = self._entries.get(key)
        if existing is not None and not isinstance(existing, Flat):
            raise BreakdownError(_kind_clash(key, existing, Flat))
        self._entries[key] = Flat(totals=values.model_copy())

    def build(self) -> Breakdown:
        return Breakdown(entries=dict(self._entries))

    def _container(self, key: str, kind: type[E]) -> E:
        existing = self._entries.get(key)
        if existing is None:
            created = kind()
            self._entries[key] = created
            return created
        if not isinstance(existing, kind):
            raise BreakdownError(_kind_clash(key, existing, kind))
        return existing


def _kind_clash(key: str, existing: object, wanted: type) -> str:
    return (
        f"Breakdown key '{key}' already holds a {type(existing).__name__} "
        f"entry, cannot write a {wanted.__name__}"
    )
