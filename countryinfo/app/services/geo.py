"""Utility functions for converting between country code forms."""

from countryinfo.app.exceptions import InvalidCountryCode
from countryinfo.app.services.lookup import ascii_upper, for_code, registry


def country_code_to_iso3(code_2: str) -> str | None:
    """Convert ISO 3166-1 alpha-2 to alpha-3."""
    record = registry.by_alpha2(ascii_upper(code_2))
    return record.alpha3 if record else None


def iso3_to_country_code(code_3: str) -> str | None:
    """Convert ISO 3166-1 alpha-3 to alpha-2."""
    record = registry.by_alpha3(ascii_upper(code_3))
    if record is None or not record.alpha2:
        return None
    return record.alpha2


def country_name(code: str | int | None) -> str | None:
    """Display name for any code for_code() accepts, or None."""
    try:
        return for_code(code).name
    except InvalidCountryCode:
        return None
