"""Tests for the for_code resolver."""

import importlib

import pytest

from countryinfo.app import country_data
from countryinfo.app.exceptions import INVALID_ISO_CODE, InvalidCountryCode, TableIntegrityError
from countryinfo.app.services import lookup
from countryinfo.app.services.lookup import all_countries, ascii_upper, for_code


@pytest.mark.parametrize(
    "code, alpha3, alpha2, numeric, name",
    [
        ("JP", "JPN", "JP", 392, "Japan"),
        ("jpn", "JPN", "JP", 392, "Japan"),
        (250, "FRA", "FR", 250, "France"),
        ("DE", "DEU", "DE", 276, "Germany"),
        ("gb", "GBR", "GB", 826, "United Kingdom"),
        (4, "AFG", "AF", 4, "Afghanistan"),
        ("ala", "ALA", "AX", 248, "Åland"),
    ],
)
def test_known_codes(code, alpha3, alpha2, numeric, name):
    record = for_code(code)
    assert record.alpha3 == alpha3
    assert record.alpha2 == alpha2
    assert record.numeric == numeric
    assert record.name == name


def test_case_insensitive():
    assert for_code("US") is for_code("us") is for_code("Us") is for_code("uS")
    assert for_code("USA") is for_code("usa") is for_code("uSa")


@pytest.mark.parametrize(
    "code",
    [None, "", "U", "ABCD", "zz", "ZZ", "ZZZ", " US", "US ", "U.S", "uš", "ßa", 0, -1, 1000, 999],
)
def test_unresolvable_codes(code):
    with pytest.raises(InvalidCountryCode) as exc_info:
        for_code(code)
    assert str(exc_info.value) == INVALID_ISO_CODE
    assert exc_info.value.code == code


@pytest.mark.parametrize("code", [True, False, 392.0, b"JP", ["JP"]])
def test_unsupported_types(code):
    with pytest.raises(InvalidCountryCode):
        for_code(code)


def test_invalid_code_is_value_error():
    with pytest.raises(ValueError, match="invalid ISO 3166 code"):
        for_code("XX")


def test_round_trip_every_country():
    for record in all_countries():
        assert for_code(record.alpha3.lower()) is record
        assert for_code(record.alpha2.lower()) is record
        assert for_code(record.numeric) is record


def test_all_countries_ordered():
    records = all_countries()
    assert len(records) == 249
    assert [r.alpha3 for r in records] == sorted(r.alpha3 for r in records)


def test_ascii_upper_only_touches_ascii():
    assert ascii_upper("jpn") == "JPN"
    assert ascii_upper("åla") == "åLA"
    assert ascii_upper("ß") == "ß"


def test_defective_table_aborts_import(monkeypatch):
    """A duplicate row in the embedded table makes the lookup module fail to load."""
    # reload rebinds these; monkeypatch puts the originals back afterwards
    monkeypatch.setattr(lookup, "registry", lookup.registry)
    monkeypatch.setattr(lookup, "COUNTRY_ROWS", lookup.COUNTRY_ROWS)
    duplicated = country_data.COUNTRY_ROWS + (country_data.COUNTRY_ROWS[0],)
    monkeypatch.setattr(country_data, "COUNTRY_ROWS", duplicated)

    with pytest.raises(TableIntegrityError, match="duplicate alpha3 'ABW'"):
        importlib.reload(lookup)
