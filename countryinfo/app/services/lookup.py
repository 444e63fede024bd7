"""Resolve ISO 3166-1 codes to country records.

The registry is built once, at import, from the embedded table. A defective
table raises TableIntegrityError here and the import fails.

Misses always raise InvalidCountryCode; there is no "unknown" record.
"""

import string

from countryinfo.app.country_data import COUNTRY_ROWS
from countryinfo.app.exceptions import InvalidCountryCode
from countryinfo.app.schemas import CountryRecord
from countryinfo.app.services.registry import CountryRegistry

registry = CountryRegistry(COUNTRY_ROWS)

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def ascii_upper(code: str) -> str:
    """Upper-case a-z only; every other character passes through."""
    return code.translate(_ASCII_UPPER)


def for_code(code: str | int | None) -> CountryRecord:
    """Look up a country by alpha-2, alpha-3 or numeric code.

    Text codes are matched case-insensitively (ASCII only) with no
    trimming: 2 characters go to the alpha-2 index, 3 to alpha-3,
    anything else misses. Integers go to the numeric index.

    Raises:
        InvalidCountryCode: if the code does not resolve.
    """
    record = None
    if isinstance(code, str):
        folded = ascii_upper(code)
        if len(folded) == 2:
            record = registry.by_alpha2(folded)
        elif len(folded) == 3:
            record = registry.by_alpha3(folded)
    elif isinstance(code, int) and not isinstance(code, bool):
        record = registry.by_numeric(code)

    if record is None:
        raise InvalidCountryCode(code)
    return record


def all_countries() -> tuple[CountryRecord, ...]:
    """Every country, alpha-3 ascending."""
    return registry.all()
