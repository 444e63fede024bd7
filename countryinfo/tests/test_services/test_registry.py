"""Tests for CountryRegistry construction and indexed lookups."""

import re

import pytest
from structlog.testing import capture_logs

from countryinfo.app.country_data import COUNTRY_ROWS
from countryinfo.app.exceptions import TableIntegrityError
from countryinfo.app.services.registry import CountryRegistry


class TestEmbeddedRegistry:
    def test_cardinality(self, registry):
        assert len(registry) == 249
        assert len(registry.all()) == 249

    def test_all_sorted_by_alpha3(self, registry):
        keys = [r.alpha3 for r in registry.all()]
        assert keys == sorted(keys)

    def test_all_is_restartable(self, registry):
        assert list(registry) == list(registry)
        assert tuple(registry) == registry.all()

    def test_positional_access(self, registry):
        assert registry[0].alpha3 == "ABW"
        assert registry[-1].alpha3 == "ZWE"

    def test_alpha3_index_total(self, registry):
        for record in registry.all():
            assert registry.by_alpha3(record.alpha3) is record

    def test_alpha2_index(self, registry):
        for record in registry.all():
            if record.alpha2:
                assert registry.by_alpha2(record.alpha2) is record

    def test_numeric_index(self, registry):
        for record in registry.all():
            if record.numeric:
                assert registry.by_numeric(record.numeric) is record

    def test_code_shapes(self, registry):
        for record in registry.all():
            assert re.fullmatch(r"[A-Z]{3}", record.alpha3)
            if record.alpha2:
                assert re.fullmatch(r"[A-Z]{2}", record.alpha2)

    def test_keys_unique(self, registry):
        records = registry.all()
        alpha3 = [r.alpha3 for r in records]
        alpha2 = [r.alpha2 for r in records if r.alpha2]
        numeric = [r.numeric for r in records if r.numeric]
        assert len(set(alpha3)) == len(alpha3)
        assert len(set(alpha2)) == len(alpha2)
        assert len(set(numeric)) == len(numeric)

    def test_lookups_are_case_sensitive(self, registry):
        assert registry.by_alpha3("usa") is None
        assert registry.by_alpha2("us") is None

    def test_empty_and_zero_keys_miss(self, registry):
        assert registry.by_alpha3("") is None
        assert registry.by_alpha2("") is None
        assert registry.by_numeric(0) is None

    def test_field_values(self, registry):
        usa = registry.by_alpha3("USA")
        assert usa.dial == "1"
        assert usa.independent_status == "Yes"
        assert registry.by_alpha3("DOM").dial == "1-809,1-829,1-849"
        assert registry.by_alpha3("VAT").dial == "39-06"
        assert registry.by_alpha3("EGY").gaul == "40765"

    def test_empty_fields_preserved(self, registry):
        cuw = registry.by_alpha3("CUW")
        assert cuw.dial == ""
        assert cuw.gaul == ""
        assert cuw.itu == ""

    def test_build_is_logged(self):
        with capture_logs() as logs:
            CountryRegistry(COUNTRY_ROWS)
        assert {"event": "Country registry built", "count": 249, "log_level": "debug"} in logs


class TestRegistryIntegrity:
    def test_rows_are_sorted_on_build(self, row_factory):
        reg = CountryRegistry([row_factory("CCC", "CC", 3), row_factory("AAA", "AA", 1)])
        assert [r.alpha3 for r in reg] == ["AAA", "CCC"]

    def test_duplicate_alpha3(self, row_factory):
        rows = [row_factory("AAA", "AA", 1), row_factory("AAA", "AB", 2)]
        with pytest.raises(TableIntegrityError, match="duplicate alpha3 'AAA'"):
            CountryRegistry(rows)

    def test_duplicate_alpha2(self, row_factory):
        rows = [row_factory("AAA", "AA", 1), row_factory("BBB", "AA", 2)]
        with capture_logs() as logs:
            with pytest.raises(TableIntegrityError, match="duplicate alpha2 'AA': AAA and BBB"):
                CountryRegistry(rows)
        violation = logs[-1]
        assert violation["event"] == "Country table integrity violation"
        assert violation["log_level"] == "error"
        assert violation["key"] == "alpha2"
        assert violation["value"] == "AA"
        assert (violation["first"], violation["second"]) == ("AAA", "BBB")

    def test_duplicate_numeric(self, row_factory):
        rows = [row_factory("AAA", "AA", 5), row_factory("BBB", "BB", 5)]
        with pytest.raises(TableIntegrityError, match="duplicate numeric 5"):
            CountryRegistry(rows)

    def test_zero_numeric_not_indexed(self, row_factory):
        reg = CountryRegistry([row_factory("AAA", "AA", 0), row_factory("BBB", "BB", 0)])
        assert reg.by_numeric(0) is None
        assert reg.by_alpha3("AAA").numeric == 0

    def test_empty_alpha2_not_indexed(self, row_factory):
        reg = CountryRegistry([row_factory("AAA", "", 1), row_factory("BBB", "", 2)])
        assert reg.by_alpha2("") is None
        assert reg.by_numeric(2).alpha3 == "BBB"

    def test_malformed_row(self, row_factory):
        with capture_logs() as logs:
            with pytest.raises(TableIntegrityError, match="malformed country row"):
                CountryRegistry([row_factory("aaa", "AA", 1)])
        violation = logs[-1]
        assert violation["event"] == "Country table integrity violation"
        assert "key" not in violation
        assert "'aaa'" in violation["row"]

    def test_string_numeric_is_malformed(self, row_factory):
        with pytest.raises(TableIntegrityError, match="malformed country row"):
            CountryRegistry([row_factory("AAA", "AA", "7")])

    def test_short_row(self):
        with pytest.raises(TableIntegrityError, match="expected 15 columns"):
            CountryRegistry([("AAA", "AA", "", 1)])

    def test_empty_table(self):
        reg = CountryRegistry([])
        assert len(reg) == 0
        assert reg.by_alpha3("USA") is None
