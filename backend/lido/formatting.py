"""Formatting helpers for quote output.

The summary panel is Italian: amounts as '12.50 €', day counts with the
right singular or plural ('1 giorno', '3 giorni').
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lido.models.breakdown import Breakdown


def singular_plural(count: int, singular: str, plural: str) -> str:
    """'1 giorno' / '2 giorni'."""
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural}"


def format_euro(amount: float) -> str:
    """Round to cents for display, e.g. '-12.00 €'."""
    return f"{amount:.2f} €"


def format_rate(price: float) -> str:
    """A daily rate without trailing zeros: 5.0 -> '5', 2.5 -> '2.5'."""
    return f"{price:g}"


def breakdown_lines(breakdown: Breakdown) -> list[tuple[str, float]]:
    """Label and amount for every non-empty breakdown line.

    Order: stay categories by period, discount, extra entrances, booth.
    """
    lines: list[tuple[str, float]] = []

    for entry in breakdown.categories().values():
        for period_id, totals in entry.periods.items():
            if totals.days == 0:
                continue
            lines.append((
                f"Permanenza {period_id + 1}º periodo per "
                f"{singular_plural(totals.days, 'giorno', 'giorni')} a "
                f"{format_rate(totals.unit_price)}€/giorno",
                totals.total_price,
            ))

    discount = breakdown.discount
    if discount is not None:
        totals = discount.totals
        lines.append((
            f"{singular_plural(totals.days, 'giorno scontato', 'giorni scontati')} "
            f"a -{format_rate(abs(totals.unit_price))}€/giorno",
            totals.total_price,
        ))

    entrances = breakdown.entrances
    if entrances is not None:
        for entrance in entrances.rows.values():
            if entrance.days == 0 or entrance.num_entrances == 0:
                continue
            lines.append((
                f"{singular_plural(entrance.num_entrances, 'ingresso', 'ingressi')} "
                f"extra per {singular_plural(entrance.days, 'giorno', 'giorni')} a "
                f"{format_rate(entrance.unit_price)}€/giorno x ingresso",
                entrance.total_price,
            ))

    booth = breakdown.booth
    if booth is not None:
        totals = booth.totals
        lines.append((
            f"Cabina privata per {singular_plural(totals.days, 'giorno', 'giorni')} "
            f"a {format_rate(totals.unit_price)}€/giorno",
            totals.total_price,
        ))

    return lines
