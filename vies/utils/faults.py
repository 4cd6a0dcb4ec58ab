from types import MappingProxyType
from typing import Mapping


ERROR_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "INVALID_INPUT_COUNTRY": "The country code in the VAT ID is invalid",
        "INVALID_INPUT_NUMBER": "The VAT number part is empty or invalid",
        "SERVICE_UNAVAILABLE": "The VIES VAT service is unavailable, please try again later",
        "MS_UNAVAILABLE": "The VAT database of the requested member country is unavailable, please try again later",
        "MS_MAX_CONCURRENT_REQ": (
            "The VAT database of the requested member country has had too many requests, please try again later"
        ),
        "TIMEOUT": "The request to VAT database of the requested member country has timed out, please try again later",
        "SERVER_BUSY": "The service cannot process your request, please try again later",
        "UNKNOWN": "Unknown error",
    }
)


def get_readable_error_msg(faultstring: str) -> str:
    return ERROR_MESSAGES.get(faultstring, ERROR_MESSAGES["UNKNOWN"])
