"""Pricing engine for the lido beach calculator.

A quote is computed in one synchronous pass over the rows entered for a
guest:

1. **Validation** — entrance and booth rows must fit inside a single stay.
   Any error blocks the whole quote: the breakdown stays empty and the
   total is zero.
2. **Stays** — each complete stay row is split across the schedule's
   periods and billed at the period's daily price for the row's category.
   Categories are matched by name; a period lacking that name adds nothing.
3. **Long-stay discount** — when the billed stay days exceed the free
   threshold, every stay day (not just the excess) is discounted.
4. **Extra entrances** — price x days x entrances, one line per row.
5. **Private booth** — price x days, all booth rows merged in one line.

The grand total is not rounded here; rounding is left to display.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lido.accumulator import BreakdownAccumulator
from lido.dates import days_in_each_period, inclusive_day_count
from lido.models.breakdown import EntranceTotals, Quote, Totals
from lido.models.enums import DISCOUNT_KEY, RESERVED_KEYS, Section
from lido.validator import validate_rows

if TYPE_CHECKING:
    from lido.models.rows import MinMaxWindow, RowData, RowSet
    from lido.models.settings import Settings

logger = logging.getLogger(__name__)


class PricingEngine:
    """Turns rows plus a rate schedule into an itemized quote.

    The engine holds no state besides the schedule; calling
    ``calculate_total`` twice with the same rows gives the same quote.

    Args:
        settings: The rate schedule to price with. It is not checked for
            validity; an incomplete schedule simply prices to zero where
            data is missing.

    Example::

        from lido import PricingEngine, find_min_max_dates

        engine = PricingEngine(settings)
        window = find_min_max_dates(rows.permanenza)
        quote = engine.calculate_total(rows, window)
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings

    def calculate_total(self, rows: RowSet, min_max: MinMaxWindow) -> Quote:
        """Price every section of ``rows``.

        Args:
            rows: All rows entered for the guest. Never modified.
            min_max: Stay window from ``find_min_max_dates`` over the
                current stay rows. The caller keeps it in sync.

        Returns:
            A Quote with the breakdown, the grand total and an annotated
            copy of the rows. If any extra row is invalid the quote carries
            the issues, an empty breakdown and a zero total.
        """
        validation = validate_rows(rows, min_max)
        if validation.has_errors:
            logger.info(
                "Quote blocked by %d invalid row(s)", len(validation.issues)
            )
            return Quote(rows=validation.rows, issues=validation.issues)

        accumulator = BreakdownAccumulator()

        stay_total, permanence_days = self._price_stays(rows.permanenza, accumulator)
        grand_total = stay_total
        grand_total += self._apply_discount(permanence_days, accumulator)

        for row in rows.entrate:
            grand_total += self._price_entrance(row, accumulator)
        for row in rows.cabina_privata:
            grand_total += self._price_booth(row, accumulator)

        breakdown = accumulator.build()
        logger.debug(
            "Quote: %d stay day(s), %d breakdown key(s), total %.2f",
            permanence_days,
            len(breakdown),
            grand_total,
        )
        return Quote(breakdown=breakdown, grand_total=grand_total, rows=validation.rows)

    def _price_stays(
        self,
        rows: list[RowData],
        accumulator: BreakdownAccumulator,
    ) -> tuple[float, int]:
        """Bill complete stay rows period by period.

        Returns (total, billed stay days).
        """
        periods = self._settings.periods
        total = 0.0
        permanence_days = 0

        for row in rows:
            if not row.is_complete_stay:
                continue
            if row.category in RESERVED_KEYS:
                logger.warning(
                    "Stay row %s uses reserved category name '%s'; not billed",
                    row.id,
                    row.category,
                )
                continue
            if not any(p.category(row.category) for p in periods):
                logger.warning(
                    "Category '%s' of stay row %s is not in any period",
                    row.category,
                    row.id,
                )
                continue

            for period, share in zip(
                periods, days_in_each_period(row, self._settings), strict=True
            ):
                if share.days <= 0:
                    continue
                category = period.category(row.category)
                if category is None:
                    continue
                price = category.price * share.days
                accumulator.add_to_period(
                    category.name,
                    share.period_id,
                    Totals(
                        days=share.days,
                        unit_price=category.price,
                        total_price=price,
                    ),
                )
                total += price
                permanence_days += share.days

        return total, permanence_days

    def _apply_discount(
        self,
        permanence_days: int,
        accumulator: BreakdownAccumulator,
    ) -> float:
        """Discount every stay day once the stay is longer than the threshold."""
        if permanence_days <= self._settings.days_no_discount:
            return 0.0

        unit_price = -self._settings.price_discount
        discount = unit_price * permanence_days
        accumulator.set_flat(
            DISCOUNT_KEY,
            Totals(days=permanence_days, unit_price=unit_price, total_price=discount),
        )
        return discount

    def _price_entrance(
        self,
        row: RowData,
        accumulator: BreakdownAccumulator,
    ) -> float:
        days = inclusive_day_count(row.from_, row.to)
        entrances = row.extra_entrances or 0
        if days == 0 or entrances <= 0:
            return 0.0

        unit_price = self._settings.price_entrance
        price = unit_price * days * entrances
        accumulator.add_to_row(
            Section.ENTRATE.value,
            row.id,
            EntranceTotals(
                days=days,
                num_entrances=entrances,
                unit_price=unit_price,
                total_price=price,
            ),
        )
        return price

    def _price_booth(
        self,
        row: RowData,
        accumulator: BreakdownAccumulator,
    ) -> float:
        days = inclusive_day_count(row.from_, row.to)
        if days == 0:
            return 0.0

        unit_price = self._settings.price_booth
        price = unit_price * days
        accumulator.add_flat(
            Section.CABINA_PRIVATA.value,
            Totals(days=days, unit_price=unit_price, total_price=price),
        )
        return price


def calculate_total(
    rows: RowSet,
    min_max: MinMaxWindow,
    settings: Settings,
) -> Quote:
    """Price ``rows`` against ``settings`` in one call.

    Shorthand for ``PricingEngine(settings).calculate_total(rows, min_max)``.
    """
    return PricingEngine(settings).calculate_total(rows, min_max)
