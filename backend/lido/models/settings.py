"""Rate schedule models: seasonal periods, per-category daily prices, extras."""

from __future__ import annotations

from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lido.models.enums import RESERVED_KEYS


class Category(BaseModel):
    """A price category (umbrella row, typically named '1', '2', ...)."""

    model_config = ConfigDict(extra="forbid")

    id: int
    name: str
    price: float = 0.0


class Period(BaseModel):
    """A slice of the season with its own category prices.

    A period runs from ``start`` to the day before the next period's start;
    the last one runs to the schedule's closing date.
    """

    model_config = ConfigDict(extra="forbid")

    id: int
    start: date | None = None
    categories: list[Category] = Field(default_factory=list)

    @field_validator("start", mode="before")
    @classmethod
    def blank_start_is_missing(cls, v: object) -> object:
        if v == "":
            return None
        return v

    def category(self, name: str | None) -> Category | None:
        """Find a category by name, or None if this period does not have it."""
        for category in self.categories:
            if category.name == name:
                return category
        return None


class Settings(BaseModel):
    """The rate schedule configured by the establishment.

    Field aliases match the saved JSON document (camelCase).
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    periods: list[Period] = Field(default_factory=list)
    price_entrance: float = Field(default=0.0, alias="priceEntrance")
    price_booth: float = Field(default=0.0, alias="priceBooth")
    closing_date: date | None = Field(default=None, alias="closingDate")
    price_discount: float = Field(default=0.0, alias="priceDiscount")
    days_no_discount: int = Field(default=0, alias="daysNoDiscount")

    @field_validator(
        "price_entrance",
        "price_booth",
        "price_discount",
        "days_no_discount",
        mode="before",
    )
    @classmethod
    def blank_number_is_zero(cls, v: object) -> object:
        if v == "":
            return 0
        return v

    @field_validator("closing_date", mode="before")
    @classmethod
    def blank_closing_date_is_missing(cls, v: object) -> object:
        if v == "":
            return None
        return v

    def period_end(self, index: int) -> date | None:
        """Last day (inclusive) of the period at ``index``.

        Returns None when the boundary is not known yet (next period or
        closing date unset).
        """
        if index + 1 < len(self.periods):
            next_start = self.periods[index + 1].start
            if next_start is None:
                return None
            return next_start - timedelta(days=1)
        return self.closing_date

    def validation_problems(self) -> list[str]:
        """Describe everything that keeps this schedule from being usable."""
        problems: list[str] = []
        if self.price_booth <= 0:
            problems.append("priceBooth must be positive")
        if self.price_entrance <= 0:
            problems.append("priceEntrance must be positive")
        if self.closing_date is None:
            problems.append("closingDate is not set")
        if not self.periods:
            problems.append("at least one period is required")

        previous_start: date | None = None
        for period in self.periods:
            label = f"period {period.id}"
            if period.start is None:
                problems.append(f"{label} has no start date")
            elif previous_start is not None and period.start <= previous_start:
                problems.append(
                    f"{label} starts on {period.start}, not after the previous "
                    f"period ({previous_start})"
                )
            previous_start = period.start or previous_start

            if not period.categories:
                problems.append(f"{label} has no categories")
            seen: set[str] = set()
            for category in period.categories:
                if not category.name:
                    problems.append(f"{label} has a category without a name")
                elif category.name in RESERVED_KEYS:
                    problems.append(
                        f"{label}: category name '{category.name}' is reserved"
                    )
                elif category.name in seen:
                    problems.append(
                        f"{label}: category name '{category.name}' is repeated"
                    )
                seen.add(category.name)
                if category.price <= 0:
                    problems.append(
                        f"{label}: category '{category.name}' needs a positive price"
                    )
        return problems

    def is_valid(self) -> bool:
        return not self.validation_problems()


def default_settings() -> Settings:
    """The schedule a fresh installation starts from (not yet valid)."""
    return Settings(
        periods=[Period(id=0, categories=[Category(id=0, name="1", price=0.0)])],
        price_entrance=0.0,
        price_booth=0.0,
        closing_date=None,
        price_discount=5.0,
        days_no_discount=15,
    )
