from importlib.metadata import version

from .exceptions.vat import (
    InvalidCountryError,
    InvalidNumberError,
    MalformedResponseError,
    RemoteFaultError,
    VatException,
)
from .schemas.vat import ValidationResult
from .services.vies import check_vat_id, validate_vat


__version__ = version("vies-client")

__all__ = [
    "InvalidCountryError",
    "InvalidNumberError",
    "MalformedResponseError",
    "RemoteFaultError",
    "ValidationResult",
    "VatException",
    "check_vat_id",
    "validate_vat",
]
