"""Immutable country registry with alpha-2, alpha-3 and numeric indices."""

from collections.abc import Iterable, Iterator, Sequence
from types import MappingProxyType

import structlog
from pydantic import ValidationError

from countryinfo.app.exceptions import TableIntegrityError
from countryinfo.app.schemas import CountryRecord

logger = structlog.get_logger()


class CountryRegistry:
    """Ordered, read-only collection of country records.

    Records are kept in alpha-3 order and can be addressed by position.
    The three indices are built once in __init__ and never change:

    - alpha-3 covers every record
    - alpha-2 covers records with a non-empty alpha-2
    - numeric covers records with a non-zero numeric code

    A duplicate key or a malformed row raises TableIntegrityError, so a
    registry either exists complete and consistent or not at all.
    """

    def __init__(self, rows: Iterable[Sequence]):
        records = [self._build_record(row) for row in rows]
        records.sort(key=lambda r: r.alpha3)
        self._records = tuple(records)

        self._by_alpha3 = MappingProxyType(
            _index(self._records, "alpha3", lambda r: r.alpha3)
        )
        self._by_alpha2 = MappingProxyType(
            _index(self._records, "alpha2", lambda r: r.alpha2 or None)
        )
        self._by_numeric = MappingProxyType(
            _index(self._records, "numeric", lambda r: r.numeric or None)
        )

        logger.debug("Country registry built", count=len(self._records))

    @staticmethod
    def _build_record(row: Sequence) -> CountryRecord:
        try:
            return CountryRecord.from_row(row)
        except (ValidationError, ValueError) as e:
            logger.error("Country table integrity violation", row=repr(row), error=str(e))
            raise TableIntegrityError(f"malformed country row {row!r}: {e}") from e

    def all(self) -> tuple[CountryRecord, ...]:
        """All records, alpha-3 ascending."""
        return self._records

    def by_alpha3(self, code: str) -> CountryRecord | None:
        """Exact, case-sensitive alpha-3 lookup."""
        return self._by_alpha3.get(code)

    def by_alpha2(self, code: str) -> CountryRecord | None:
        """Exact, case-sensitive alpha-2 lookup."""
        return self._by_alpha2.get(code)

    def by_numeric(self, number: int) -> CountryRecord | None:
        """Numeric lookup; 0 never matches."""
        return self._by_numeric.get(number)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CountryRecord]:
        return iter(self._records)

    def __getitem__(self, position: int) -> CountryRecord:
        return self._records[position]

    def __repr__(self) -> str:
        return f"CountryRegistry({len(self._records)} countries)"


def _index(records, key_name, key_of) -> dict:
    """Map key -> record, skipping None keys and refusing duplicates."""
    index = {}
    for record in records:
        key = key_of(record)
        if key is None:
            continue
        existing = index.get(key)
        if existing is not None:
            logger.error(
                "Country table integrity violation",
                key=key_name,
                value=key,
                first=existing.alpha3,
                second=record.alpha3,
            )
            raise TableIntegrityError(
                f"duplicate {key_name} {key!r}: {existing.alpha3} and {record.alpha3}"
            )
        index[key] = record
    return index
