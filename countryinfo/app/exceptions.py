"""Exception classes for country lookups.

- InvalidCountryCode: recoverable, raised by the resolver on a miss
- TableIntegrityError: fatal, raised while building a registry
"""

INVALID_ISO_CODE = "invalid ISO 3166 code"


class CountryInfoError(Exception):
    """Base exception for all countryinfo errors."""
    pass


class InvalidCountryCode(CountryInfoError, ValueError):
    """The given code does not resolve to any country.

    Covers None, wrong length, unknown alpha-2/alpha-3 spelling,
    non-ASCII letters, unknown numeric codes and unsupported types.
    The message is always the same; the rejected input is kept on ``code``.
    """

    def __init__(self, code=None):
        super().__init__(INVALID_ISO_CODE)
        self.code = code


class TableIntegrityError(CountryInfoError):
    """The embedded country table is malformed or has duplicate keys.

    This is a defect in the shipped data, not bad user input.
    """
    pass
