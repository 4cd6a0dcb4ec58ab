from .vat_exception import VatException
from ..utils.faults import get_readable_error_msg


__all__ = [
    "VatException",
    "InvalidCountryError",
    "InvalidNumberError",
    "RemoteFaultError",
    "MalformedResponseError",
]


class InvalidCountryError(VatException):
    detail = "Invalid country"
    description = get_readable_error_msg("INVALID_INPUT_COUNTRY")


class InvalidNumberError(VatException):
    detail = "Invalid VAT number"
    description = get_readable_error_msg("INVALID_INPUT_NUMBER")


class RemoteFaultError(VatException):
    detail = "Remote fault"
    description = get_readable_error_msg("UNKNOWN")

    def __init__(self, code: str, faultstring: str) -> None:
        self.code = code
        self.faultstring = faultstring
        super().__init__(get_readable_error_msg(faultstring))

    def is_server_fault(self, server_fault_code: str) -> bool:
        return self.code == server_fault_code


class MalformedResponseError(VatException):
    detail = "Malformed response"
    description = "The VIES response could not be parsed."

    def __init__(self, field: str | None, body: str) -> None:
        self.field = field
        self.body = body
        super().__init__(f"Failed to parse field {field}" if field else "Failed to parse response")
