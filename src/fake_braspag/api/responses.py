"""
XML replies of the Pagador web service.

Reply shapes mirror the real Pagador SOAP/HTTP-POST service closely enough
for client parsers: a PagadorReturn element in the Pagador namespace whose
children carry the transaction outcome.
"""

import xml.etree.ElementTree as ET

from fastapi.responses import Response

from fake_braspag.domain import AuthorizeDecision, CaptureDecision

PAGADOR_NAMESPACE = "https://www.pagador.com.br/webservice/pagador"
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'
XML_MEDIA_TYPE = "text/xml"

# Fixed reply fields of the Pagador fixture
AUTHORIZE_MESSAGE = "Transaction Successful"
AUTHORIZE_RETURN_CODE = "7"
AUTHORISATION_NUMBER = "733610"
CAPTURE_MESSAGE = "Approved"
CAPTURE_RETURN_CODE = "0"


def _root(tag: str) -> ET.Element:
    return ET.Element(
        tag,
        {
            "xmlns:xsi": "http://www.w3.org/2001/XMLSchema-instance",
            "xmlns:xsd": "http://www.w3.org/2001/XMLSchema",
            "xmlns": PAGADOR_NAMESPACE,
        },
    )


def _add_children(root: ET.Element, fields: list[tuple[str, str | None]]) -> None:
    for name, value in fields:
        ET.SubElement(root, name).text = value or ""


def _render(root: ET.Element) -> str:
    return XML_DECLARATION + ET.tostring(root, encoding="unicode")


def render_authorize(decision: AuthorizeDecision, order_id: str, amount: str | None) -> str:
    root = _root("PagadorReturn")
    _add_children(
        root,
        [
            ("amount", amount),
            ("message", AUTHORIZE_MESSAGE),
            ("authorisationNumber", AUTHORISATION_NUMBER),
            ("returnCode", AUTHORIZE_RETURN_CODE),
            ("status", decision.status.value),
            ("transactionId", order_id),
        ],
    )
    return _render(root)


def render_capture(decision: CaptureDecision, amount: str) -> str:
    root = _root("PagadorReturn")
    _add_children(
        root,
        [
            ("amount", amount),
            ("message", CAPTURE_MESSAGE),
            ("returnCode", CAPTURE_RETURN_CODE),
            ("status", decision.status.value if decision.status else None),
        ],
    )
    return _render(root)


def render_order_data(order_id: str, amount: str) -> str:
    root = _root("DadosPedido")
    _add_children(root, [("NumeroPedido", order_id), ("Valor", amount)])
    return _render(root)


def xml_response(content: str, status_code: int = 200) -> Response:
    return Response(content=content, status_code=status_code, media_type=XML_MEDIA_TYPE)
