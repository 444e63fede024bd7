from collections.abc import Sequence

from pydantic import BaseModel, Field

from countryinfo.app.country_data import COLUMNS


# --- Country schemas ---

class CountryRecord(BaseModel):
    """One country and its codes across the supported naming systems.

    Empty strings mean "no code assigned" and are kept as-is; they are
    never turned into None.
    """

    alpha3: str = Field(pattern=r"^[A-Z]{3}$")
    alpha2: str = Field(pattern=r"^([A-Z]{2})?$")
    cctld: str = Field(default="", pattern=r"^(\.[a-z]{2})?$")
    numeric: int = Field(ge=0, le=999, strict=True)
    itu: str = ""
    fips: str = ""
    ioc: str = ""
    fifa: str = ""
    ds: str = ""
    wmo: str = ""
    gaul: str = ""
    marc: str = ""
    dial: str = ""
    name: str = Field(min_length=1)
    independent_status: str = ""

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_row(cls, row: Sequence) -> "CountryRecord":
        """Build a record from a positional table row (see COLUMNS)."""
        if len(row) != len(COLUMNS):
            raise ValueError(
                f"expected {len(COLUMNS)} columns, got {len(row)}: {row!r}"
            )
        return cls(**dict(zip(COLUMNS, row)))

    def to_dict(self) -> dict:
        return self.model_dump()
