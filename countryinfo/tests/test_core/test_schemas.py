"""Tests for the CountryRecord model."""

import pytest
from pydantic import ValidationError

from countryinfo.app.schemas import CountryRecord


class TestCountryRecord:
    def test_from_row_maps_columns(self, row_factory):
        record = CountryRecord.from_row(row_factory("AAA", "AA", 7, cctld=".aa", dial="1-234"))
        assert record.alpha3 == "AAA"
        assert record.alpha2 == "AA"
        assert record.numeric == 7
        assert record.cctld == ".aa"
        assert record.dial == "1-234"
        assert record.name == "Country AAA"

    def test_from_row_wrong_arity(self):
        with pytest.raises(ValueError, match="expected 15 columns"):
            CountryRecord.from_row(("AAA", "AA", "", 7))

    def test_frozen(self, row_factory):
        record = CountryRecord.from_row(row_factory("AAA", "AA", 7))
        with pytest.raises(ValidationError):
            record.name = "Renamed"

    def test_hashable_and_equal_by_value(self, row_factory):
        a = CountryRecord.from_row(row_factory("AAA", "AA", 7))
        b = CountryRecord.from_row(row_factory("AAA", "AA", 7))
        assert a == b
        assert len({a, b}) == 1

    def test_to_dict_keeps_empty_strings(self, row_factory):
        data = CountryRecord.from_row(row_factory("AAA", "AA", 7)).to_dict()
        assert data["fifa"] == ""
        assert data["cctld"] == ""
        assert None not in data.values()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"alpha3": "aaa"},
            {"alpha3": "AA"},
            {"alpha2": "A1"},
            {"numeric": 1000},
            {"numeric": -1},
            {"cctld": "aa"},
            {"cctld": ".AA"},
            {"name": ""},
            {"gaul": 40765},
            {"numeric": "7"},
            {"numeric": True},
        ],
    )
    def test_rejects_malformed_fields(self, row_factory, overrides):
        overrides = dict(overrides)
        row = row_factory(
            overrides.pop("alpha3", "AAA"),
            overrides.pop("alpha2", "AA"),
            overrides.pop("numeric", 7),
            **overrides,
        )
        with pytest.raises(ValidationError):
            CountryRecord.from_row(row)
