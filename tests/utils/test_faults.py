import pytest

from vies.utils.faults import ERROR_MESSAGES, get_readable_error_msg


@pytest.mark.parametrize(
    "faultstring,expected",
    [
        ("INVALID_INPUT", "Unknown error"),
        ("MS_UNAVAILABLE", "The VAT database of the requested member country is unavailable, please try again later"),
        ("SERVER_BUSY", "The service cannot process your request, please try again later"),
        ("", "Unknown error"),
        ("ms_unavailable", "Unknown error"),
    ],
)
def test__get_readable_error_msg(faultstring: str, expected: str) -> None:
    assert get_readable_error_msg(faultstring) == expected


def test__error_messages() -> None:
    assert set(ERROR_MESSAGES) == {
        "INVALID_INPUT_COUNTRY",
        "INVALID_INPUT_NUMBER",
        "SERVICE_UNAVAILABLE",
        "MS_UNAVAILABLE",
        "MS_MAX_CONCURRENT_REQ",
        "TIMEOUT",
        "SERVER_BUSY",
        "UNKNOWN",
    }
    for key, message in ERROR_MESSAGES.items():
        assert get_readable_error_msg(key) == message

    with pytest.raises(TypeError):
        ERROR_MESSAGES["UNKNOWN"] = "foo"  # type: ignore[index]
