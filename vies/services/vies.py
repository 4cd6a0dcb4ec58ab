from httpx import USE_CLIENT_DEFAULT, AsyncClient

from ..exceptions.vat import InvalidCountryError, InvalidNumberError, RemoteFaultError
from ..logger import get_logger
from ..schemas.vat import ValidationResult
from ..settings import settings
from ..utils.soap import build_request, parse_response
from ..utils.vat import split_vat_id, validate_vat_id


logger = get_logger(__name__)


HEADERS: dict[str, str] = {
    "Content-Type": "application/xml",
    "Accept": "application/xml,text/xml",
    "Accept-Encoding": "none",
    "Accept-Charset": "utf-8",
    "Connection": "close",
    "SOAPAction": "urn:ec.europa.eu:taxud:vies:services:checkVat/checkVat",
}


async def _post(client: AsyncClient, xml: str, timeout: float | None) -> str:
    resp = await client.post(
        settings.service_url,
        content=xml.encode(),
        headers={**HEADERS, "User-Agent": settings.user_agent},
        timeout=USE_CLIENT_DEFAULT if timeout is None else timeout,
    )
    # faults come with status 500, the body is parsed regardless of the status code
    logger.debug(f"VIES responded with status {resp.status_code}")
    return resp.text


async def validate_vat(
    vat_id: str, timeout: float | None = None, *, client: AsyncClient | None = None
) -> ValidationResult:
    """
    Validate a VAT id (e.g. `DE123456789`) using the VIES checkVat service.

    `timeout` is given in seconds. If it expires the `httpx.TimeoutException` is raised as is, like any other
    transport error.

    If the VAT database of the member state is down, the VAT id is presumed to be valid and `server_validated` is
    `False`. Any other fault is raised as `RemoteFaultError`.
    """

    country_code, vat_number = split_vat_id(vat_id)
    validate_vat_id(vat_id)
    xml = build_request(country_code, vat_number)

    logger.debug(f"Checking VAT id {vat_id} at {settings.service_url}")
    if client is not None:
        body = await _post(client, xml, timeout)
    else:
        async with AsyncClient(timeout=settings.timeout) as own_client:
            body = await _post(own_client, xml, timeout)

    try:
        return parse_response(body)
    except RemoteFaultError as e:
        if not e.is_server_fault(settings.server_fault_code):
            raise

        # the member state is unable to check the number, don't block the caller because of that
        logger.warning(f"VAT database unavailable ({e.code}: {e.faultstring}), presuming {vat_id} to be valid")
        return ValidationResult(
            country_code=country_code,
            vat_number=vat_number,
            valid=True,
            server_validated=False,
            name="",
            address="",
        )


async def check_vat_id(vat_id: str, timeout: float | None = None) -> bool:
    try:
        return (await validate_vat(vat_id, timeout)).valid
    except (InvalidCountryError, InvalidNumberError):
        return False
