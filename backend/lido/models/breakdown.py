"""Pricing output models: the itemized breakdown and the final quote."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from lido.models.enums import DISCOUNT_KEY, Section
from lido.models.rows import RowId, RowIssue, RowSet


class Totals(BaseModel):
    """Days billed, the daily unit price and the resulting amount."""

    model_config = ConfigDict(populate_by_name=True)

    days: int
    unit_price: float = Field(alias="unitPrice")
    total_price: float = Field(alias="totalPrice")


class EntranceTotals(Totals):
    """Totals for an entrance row, which also bills a number of entrances."""

    num_entrances: int = Field(alias="numEntrances")


class PerPeriod(BaseModel):
    """A stay category billed period by period."""

    kind: Literal["per_period"] = "per_period"
    periods: dict[int, Totals] = Field(default_factory=dict)

    @property
    def total_price(self) -> float:
        return sum(t.total_price for t in self.periods.values())


class PerRow(BaseModel):
    """Extra entrances, billed and displayed row by row."""

    kind: Literal["per_row"] = "per_row"
    rows: dict[RowId, EntranceTotals] = Field(default_factory=dict)

    @property
    def total_price(self) -> float:
        return sum(t.total_price for t in self.rows.values())


class Flat(BaseModel):
    """A single merged line (private booth, long-stay discount)."""

    kind: Literal["flat"] = "flat"
    totals: Totals

    @property
    def total_price(self) -> float:
        return self.totals.total_price


BreakdownEntry = Annotated[PerPeriod | PerRow | Flat, Field(discriminator="kind")]


class Breakdown(BaseModel):
    """Itemized decomposition of a grand total.

    Keys are category names for stays, plus the fixed keys "Entrate",
    "Cabina privata" and "Sconto". Insertion order follows the pricing pass.
    """

    entries: dict[str, BreakdownEntry] = Field(default_factory=dict)

    def __getitem__(self, key: str) -> PerPeriod | PerRow | Flat:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> list[str]:
        return list(self.entries)

    def categories(self) -> dict[str, PerPeriod]:
        """Stay entries keyed by category name."""
        return {
            key: entry
            for key, entry in self.entries.items()
            if isinstance(entry, PerPeriod)
        }

    @property
    def entrances(self) -> PerRow | None:
        entry = self.entries.get(Section.ENTRATE.value)
        return entry if isinstance(entry, PerRow) else None

    @property
    def booth(self) -> Flat | None:
        entry = self.entries.get(Section.CABINA_PRIVATA.value)
        return entry if isinstance(entry, Flat) else None

    @property
    def discount(self) -> Flat | None:
        entry = self.entries.get(DISCOUNT_KEY)
        return entry if isinstance(entry, Flat) else None

    def to_mapping(self) -> dict[str, Any]:
        """Plain nested dicts, as the calculator front end stores them.

        Period and row ids become string keys; record fields use camelCase.
        """
        mapping: dict[str, Any] = {}
        for key, entry in self.entries.items():
            if isinstance(entry, PerPeriod):
                mapping[key] = {
                    str(pid): t.model_dump(by_alias=True)
                    for pid, t in entry.periods.items()
                }
            elif isinstance(entry, PerRow):
                mapping[key] = {
                    str(rid): t.model_dump(by_alias=True)
                    for rid, t in entry.rows.items()
                }
            else:
                mapping[key] = entry.totals.model_dump(by_alias=True)
        return mapping


class Quote(BaseModel):
    """Result of one pricing pass.

    ``rows`` is a copy of the input rows with validation errors attached;
    the input itself is never modified. When ``issues`` is non-empty the
    breakdown is empty and the grand total is zero.
    """

    breakdown: Breakdown = Field(default_factory=Breakdown)
    grand_total: float = 0.0
    rows: RowSet = Field(default_factory=RowSet)
    issues: list[RowIssue] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.issues)

    def to_summary_dict(self) -> dict[str, Any]:
        """Display-ready strings for the calculator summary panel."""
        from lido.formatting import breakdown_lines, format_euro

        return {
            "lines": [
                {"label": label, "amount_formatted": format_euro(amount)}
                for label, amount in breakdown_lines(self.breakdown)
            ],
            "total_formatted": format_euro(self.grand_total),
            "has_errors": self.has_errors,
            "errors": [
                {
                    "section": issue.section.value,
                    "row_id": issue.row_id,
                    "message": issue.error.message,
                }
                for issue in self.issues
            ],
        }

    def to_export_dict(self) -> dict[str, Any]:
        """JSON-ready dict in the calculator's own shape."""
        return {
            "breakdown": self.breakdown.to_mapping(),
            "grandTotal": self.grand_total,
            "rows": self.rows.model_dump(mode="json", by_alias=True),
            "issues": [
                {
                    "section": issue.section.value,
                    "rowId": issue.row_id,
                    "field": issue.error.field.value,
                    "kind": issue.error.kind.value,
                    "message": issue.error.message,
                }
                for issue in self.issues
            ],
        }
