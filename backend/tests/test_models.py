"""Tests for rows, settings and breakdown models."""

from __future__ import annotations

import json
from datetime import date

import pytest
from pydantic import ValidationError

from lido.models import (
    Breakdown,
    Category,
    ErrorField,
    ErrorKind,
    Flat,
    PerPeriod,
    PerRow,
    Period,
    RowData,
    RowError,
    RowSet,
    RowState,
    Section,
    Settings,
    can_add_row,
    default_settings,
    new_row,
    row_has_data,
    row_state,
)

_SOURCE_SETTINGS = {
    "periods": [
        {"id": 0, "start": "2021-08-01", "categories": [{"id": 0, "name": "1", "price": 5}]},
        {"id": 1, "start": "2021-08-15", "categories": [{"id": 0, "name": "1", "price": 3}]},
    ],
    "priceEntrance": 5,
    "priceBooth": 5,
    "closingDate": "2021-08-31",
    "priceDiscount": 5,
    "daysNoDiscount": 15,
}


def _settings(**overrides: object) -> Settings:
    data = json.loads(json.dumps(_SOURCE_SETTINGS))
    data.update(overrides)
    return Settings.model_validate(data)


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------


class TestRowData:
    def test_parses_calculator_json(self) -> None:
        row = RowData.model_validate(
            {"id": 1630000000000, "from": "2021-08-05", "to": "2021-08-20", "category": "1"}
        )
        assert row.from_ == date(2021, 8, 5)
        assert row.to == date(2021, 8, 20)
        assert row.is_complete_stay

    def test_blank_inputs_are_missing(self) -> None:
        row = RowData.model_validate(
            {"id": 1, "from": "", "to": "", "category": "", "extraEntrances": ""}
        )
        assert row.from_ is None
        assert row.to is None
        assert row.category is None
        assert row.extra_entrances is None
        assert not row_has_data(row)

    def test_negative_entrances_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RowData(id=1, extra_entrances=-1)

    def test_dump_uses_aliases(self) -> None:
        row = RowData(id="a", from_=date(2021, 8, 5), extra_entrances=2)
        dumped = row.model_dump(mode="json", by_alias=True, exclude_none=True)
        assert dumped == {"id": "a", "from": "2021-08-05", "extraEntrances": 2}

    def test_new_rows_have_distinct_ids(self) -> None:
        assert new_row().id != new_row().id


class TestRowSet:
    def test_parses_section_names(self) -> None:
        rows = RowSet.model_validate({
            "Permanenza": [{"id": 1, "from": "2021-08-01", "to": "2021-08-02", "category": "1"}],
            "Cabina privata": [{"id": 2}],
        })
        assert len(rows.permanenza) == 1
        assert rows.entrate == []
        assert rows.section(Section.CABINA_PRIVATA)[0].id == 2

    def test_initial_has_one_empty_row_per_section(self) -> None:
        rows = RowSet.initial()
        for section in Section:
            assert len(rows.section(section)) == 1
            assert not row_has_data(rows.section(section)[0])

    def test_with_section_returns_copy(self) -> None:
        rows = RowSet.initial()
        replaced = rows.with_section(Section.ENTRATE, [])
        assert replaced.entrate == []
        assert len(rows.entrate) == 1


class TestRowState:
    def test_empty(self) -> None:
        assert row_state(Section.PERMANENZA, RowData(id=1)) == RowState.EMPTY

    def test_partial_stay_without_category(self) -> None:
        row = RowData(id=1, from_=date(2021, 8, 1), to=date(2021, 8, 2))
        assert row_state(Section.PERMANENZA, row) == RowState.PARTIAL
        assert not can_add_row(Section.PERMANENZA, row)

    def test_complete_booth(self) -> None:
        row = RowData(id=1, from_=date(2021, 8, 1), to=date(2021, 8, 2))
        assert row_state(Section.CABINA_PRIVATA, row) == RowState.COMPLETE_VALID
        assert can_add_row(Section.CABINA_PRIVATA, row)

    def test_entrance_needs_positive_count(self) -> None:
        row = RowData(id=1, from_=date(2021, 8, 1), to=date(2021, 8, 2), extra_entrances=0)
        assert row_state(Section.ENTRATE, row) == RowState.PARTIAL
        assert can_add_row(Section.ENTRATE, row.model_copy(update={"extra_entrances": 1}))

    def test_complete_with_error_is_invalid(self) -> None:
        row = RowData(
            id=1,
            from_=date(2021, 8, 1),
            to=date(2021, 8, 2),
            error=RowError(
                kind=ErrorKind.NOT_WITHIN_ANY_STAY,
                field=ErrorField.BOTH,
                message="x",
            ),
        )
        assert row_state(Section.CABINA_PRIVATA, row) == RowState.COMPLETE_INVALID


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettings:
    def test_parses_saved_document(self) -> None:
        settings = _settings()
        assert settings.price_entrance == 5.0
        assert settings.closing_date == date(2021, 8, 31)
        assert settings.periods[1].category("1") == Category(id=0, name="1", price=3)

    def test_form_strings_are_coerced(self) -> None:
        settings = _settings(priceEntrance="5.50", daysNoDiscount="10")
        assert settings.price_entrance == 5.5
        assert settings.days_no_discount == 10

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _settings(priceUmbrella=3)

    def test_period_end(self) -> None:
        settings = _settings()
        assert settings.period_end(0) == date(2021, 8, 14)
        assert settings.period_end(1) == date(2021, 8, 31)

    def test_valid(self) -> None:
        assert _settings().is_valid()
        assert _settings().validation_problems() == []

    @pytest.mark.parametrize(
        ("overrides", "problem"),
        [
            ({"priceBooth": 0}, "priceBooth"),
            ({"priceEntrance": -1}, "priceEntrance"),
            ({"closingDate": ""}, "closingDate"),
            ({"periods": []}, "at least one period"),
        ],
    )
    def test_invalid_top_level(self, overrides: dict[str, object], problem: str) -> None:
        settings = _settings(**overrides)
        assert not settings.is_valid()
        assert any(problem in p for p in settings.validation_problems())

    def test_period_problems(self) -> None:
        settings = Settings(
            periods=[
                Period(id=0, start=date(2021, 8, 15), categories=[Category(id=0, name="1", price=0)]),
                Period(id=1, start=date(2021, 8, 1), categories=[]),
                Period(id=2, start=None, categories=[
                    Category(id=0, name="2", price=1),
                    Category(id=1, name="2", price=1),
                    Category(id=2, name="Entrate", price=1),
                ]),
            ],
            price_entrance=1,
            price_booth=1,
            closing_date=date(2021, 8, 31),
        )
        problems = settings.validation_problems()
        assert any("needs a positive price" in p for p in problems)
        assert any("not after the previous period" in p for p in problems)
        assert any("period 1 has no categories" in p for p in problems)
        assert any("period 2 has no start date" in p for p in problems)
        assert any("is repeated" in p for p in problems)
        assert any("is reserved" in p for p in problems)

    def test_default_settings_are_not_valid(self) -> None:
        settings = default_settings()
        assert not settings.is_valid()
        assert settings.price_discount == 5.0
        assert settings.days_no_discount == 15
        assert settings.periods[0].categories[0].name == "1"


# ---------------------------------------------------------------------------
# Breakdown
# ---------------------------------------------------------------------------


class TestBreakdown:
    def _breakdown(self) -> Breakdown:
        return Breakdown.model_validate({
            "entries": {
                "1": {
                    "kind": "per_period",
                    "periods": {"0": {"days": 10, "unitPrice": 5, "totalPrice": 50}},
                },
                "Entrate": {
                    "kind": "per_row",
                    "rows": {
                        "a": {"days": 3, "numEntrances": 2, "unitPrice": 5, "totalPrice": 30},
                    },
                },
                "Cabina privata": {
                    "kind": "flat",
                    "totals": {"days": 2, "unitPrice": 5, "totalPrice": 10},
                },
            }
        })

    def test_entry_kind_selects_variant(self) -> None:
        breakdown = self._breakdown()
        assert isinstance(breakdown["1"], PerPeriod)
        assert isinstance(breakdown["Entrate"], PerRow)
        assert isinstance(breakdown["Cabina privata"], Flat)
        assert breakdown["1"].kind == "per_period"

    def test_accessors(self) -> None:
        breakdown = self._breakdown()
        assert list(breakdown.categories()) == ["1"]
        assert breakdown.entrances is not None
        assert breakdown.booth is not None
        assert breakdown.discount is None
        assert "Sconto" not in breakdown

    def test_round_trips_through_json(self) -> None:
        breakdown = self._breakdown()
        assert Breakdown.model_validate_json(breakdown.model_dump_json()) == breakdown

    def test_to_mapping_shape(self) -> None:
        mapping = self._breakdown().to_mapping()
        assert mapping["1"] == {"0": {"days": 10, "unitPrice": 5.0, "totalPrice": 50.0}}
        assert mapping["Entrate"]["a"]["numEntrances"] == 2
        assert mapping["Cabina privata"] == {"days": 2, "unitPrice": 5.0, "totalPrice": 10.0}
