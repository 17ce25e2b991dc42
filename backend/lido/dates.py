"""Calendar arithmetic: inclusive day counts and period overlaps.

All values are ``datetime.date``; subtracting two dates yields whole days,
so there is no daylight-saving drift to correct for.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lido.models.rows import MinMaxWindow

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from lido.models.rows import RowData
    from lido.models.settings import Settings


@dataclass(frozen=True)
class PeriodDays:
    """How many days of a row fall inside one pricing period."""

    period_id: int
    days: int


def inclusive_day_count(start: date | None, end: date | None) -> int:
    """Days from ``start`` to ``end``, both included; 0 if either is missing
    or ``end`` precedes ``start``."""
    if start is None or end is None:
        return 0
    return max(0, (end - start).days + 1)


def days_in_each_period(row: RowData, settings: Settings) -> list[PeriodDays]:
    """Split a row's date range across the schedule's periods.

    Returns one entry per period, in schedule order, including periods the
    row does not touch (``days == 0``). A period whose boundaries are not
    known yet (missing start, next start or closing date) counts 0 days.
    Rows without both dates yield an empty list.
    """
    if row.from_ is None or row.to is None:
        return []

    result: list[PeriodDays] = []
    for index, period in enumerate(settings.periods):
        period_end = settings.period_end(index)
        if period.start is None or period_end is None:
            result.append(PeriodDays(period_id=period.id, days=0))
            continue
        start = max(period.start, row.from_)
        end = min(period_end, row.to)
        result.append(
            PeriodDays(period_id=period.id, days=inclusive_day_count(start, end))
        )
    return result


def find_min_max_dates(stay_rows: Iterable[RowData]) -> MinMaxWindow:
    """Build the window extra rows must fall into.

    Only rows with both dates count. The window must be rebuilt by the
    caller whenever stay rows change.
    """
    ranged = sorted(
        (row for row in stay_rows if row.from_ is not None and row.to is not None),
        key=lambda row: row.from_,
    )
    if not ranged:
        return MinMaxWindow()
    return MinMaxWindow(
        from_=ranged[0].from_,
        to=max(row.to for row in ranged),
        sorted_rows=ranged,
    )
