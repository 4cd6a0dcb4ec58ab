import re

from .countries import EU_COUNTRY_CODES
from ..exceptions.vat import InvalidCountryError, InvalidNumberError


VAT_ID_REGEX = re.compile(r"^[A-Z]{2}[0-9A-Z]{2,13}$")


def split_vat_id(vat_id: str) -> tuple[str, str]:
    """Split a VAT id into its country code and the number part, e.g. "DE123456789" -> ("DE", "123456789")."""

    return vat_id[:2], vat_id[2:]


def validate_vat_id(vat_id: str) -> None:
    """
    Check a VAT id before sending it to VIES.

    The country code is checked first, so an id with an unknown prefix always raises `InvalidCountryError`,
    even if the rest of it is malformed too.
    """

    country_code, _ = split_vat_id(vat_id)
    if country_code not in EU_COUNTRY_CODES:
        raise InvalidCountryError
    if not VAT_ID_REGEX.fullmatch(vat_id):
        raise InvalidNumberError
