"""Building checkVat requests and parsing the responses of the VIES SOAP service."""

from lxml import etree

from ..exceptions.vat import MalformedResponseError, RemoteFaultError
from ..logger import get_logger
from ..schemas.vat import ValidationResult


logger = get_logger(__name__)


SOAP_ENVELOPE_NS = "http://schemas.xmlsoap.org/soap/envelope/"

SOAP_REQUEST_TEMPLATE = """
<soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/"
  xmlns:tns1="urn:ec.europa.eu:taxud:vies:services:checkVat:types"
  xmlns:impl="urn:ec.europa.eu:taxud:vies:services:checkVat">
  <soap:Header>
  </soap:Header>
  <soap:Body>
    <tns1:checkVat xmlns:tns1="urn:ec.europa.eu:taxud:vies:services:checkVat:types"
     xmlns="urn:ec.europa.eu:taxud:vies:services:checkVat:types">
     <tns1:countryCode>{country_code}</tns1:countryCode>
     <tns1:vatNumber>{vat_number}</tns1:vatNumber>
    </tns1:checkVat>
  </soap:Body>
</soap:Envelope>
"""


def build_request(country_code: str, vat_number: str) -> str:
    """
    Render the checkVat envelope.

    The values are inserted without escaping, they must have passed `utils.vat.validate_vat_id` (only `A-Z0-9`).
    """

    return SOAP_REQUEST_TEMPLATE.format(country_code=country_code, vat_number=vat_number).strip()


def _find_text(root: etree._Element, tag: str, body: str) -> str:
    """Return the stripped text of the first element named `tag` (ignoring namespaces) in document order."""

    for element in root.iter(etree.Element):
        if etree.QName(element).localname == tag:
            return "".join(element.itertext()).strip()
    raise MalformedResponseError(tag, body)


def _find_fault(root: etree._Element) -> etree._Element | None:
    for fault in root.iter(f"{{{SOAP_ENVELOPE_NS}}}Fault"):
        if len(fault) or (fault.text and fault.text.strip()):
            return fault
    return None


def parse_response(body: str) -> ValidationResult:
    """
    Parse the body of a checkVat response.

    Raises `RemoteFaultError` if the body contains a non-empty SOAP fault and `MalformedResponseError` if it is not
    XML or a field is missing.
    """

    try:
        # the text is already decoded, an encoding declared in the document must not be applied again
        parser = etree.XMLParser(encoding="utf-8", resolve_entities=False, no_network=True)
        root = etree.fromstring(body.encode(), parser)
    except etree.XMLSyntaxError:
        raise MalformedResponseError(None, body)

    if _find_fault(root) is not None:
        faultstring = _find_text(root, "faultstring", body)
        faultcode = _find_text(root, "faultcode", body)
        logger.debug(f"VIES fault: {faultcode} {faultstring}")
        raise RemoteFaultError(faultcode, faultstring)

    return ValidationResult(
        country_code=_find_text(root, "countryCode", body),
        vat_number=_find_text(root, "vatNumber", body),
        valid=_find_text(root, "valid", body) == "true",
        server_validated=True,
        name=_find_text(root, "name", body),
        address=_find_text(root, "address", body).replace("\n", ", "),
    )
