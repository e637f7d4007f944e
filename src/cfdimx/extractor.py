"""Build :class:`~cfdimx.models.InvoiceRecord` values from CFDI XML."""

from __future__ import annotations

import logging
from typing import NoReturn

from lxml import etree

from .errors import (
    CfdiError,
    MissingIssuerError,
    MissingRecipientError,
    MissingStampError,
    NoLineItemsError,
)
from .locator import find_all_elements, find_element, get_attribute, parse_document
from .models import (
    ExtractionOutcome,
    InvoiceRecord,
    Issuer,
    LineItem,
    Recipient,
    Stamp,
    TaxSummary,
    TaxTransfer,
)

LOGGER = logging.getLogger("cfdimx.extractor")

DEFAULT_VERSION = "4.0"
DEFAULT_CURRENCY = "MXN"
DEFAULT_AMOUNT = "0"
DEFAULT_QUANTITY = "1"


def parse_cfdi(text: str | bytes) -> ExtractionOutcome:
    """Parse and extract ``text`` without raising for CFDI problems.

    The returned outcome carries either the record or the error that stopped
    the extraction, never both.
    """

    try:
        record = extract(parse_document(text))
    except CfdiError as exc:
        return ExtractionOutcome.failure(exc)
    return ExtractionOutcome.success(record)


def extract(tree: etree._ElementTree) -> InvoiceRecord:
    """Extract the invoice record from an already parsed ``tree``.

    Raises a :class:`~cfdimx.errors.CfdiError` subclass when the stamp, the
    issuer, the recipient or every line item is missing. Any other absent
    attribute falls back to its default.
    """

    comprobante = find_element(tree, "Comprobante")
    if comprobante is None:
        # Producers rarely wrap the root; accept whatever the document element is.
        LOGGER.debug("Comprobante no encontrado, se usa el elemento raíz.")
        comprobante = tree.getroot()

    stamp = find_element(tree, "TimbreFiscalDigital")
    if stamp is None:
        _fail(MissingStampError())

    emisor = find_element(comprobante, "Emisor")
    if emisor is None:
        _fail(MissingIssuerError())

    receptor = find_element(comprobante, "Receptor")
    if receptor is None:
        _fail(MissingRecipientError())

    conceptos = find_all_elements(comprobante, "Concepto")
    if not conceptos:
        _fail(NoLineItemsError())

    impuestos = _find_tax_summary(comprobante)

    return InvoiceRecord(
        schema_version=get_attribute(comprobante, "Version", DEFAULT_VERSION),
        series=get_attribute(comprobante, "Serie"),
        folio_number=get_attribute(comprobante, "Folio"),
        issue_timestamp=get_attribute(comprobante, "Fecha", ""),
        document_kind=get_attribute(comprobante, "TipoDeComprobante", ""),
        currency_code=get_attribute(comprobante, "Moneda", DEFAULT_CURRENCY),
        subtotal_amount=get_attribute(comprobante, "SubTotal", DEFAULT_AMOUNT),
        total_amount=get_attribute(comprobante, "Total", DEFAULT_AMOUNT),
        issuer=Issuer(
            tax_id=get_attribute(emisor, "Rfc", ""),
            legal_name=get_attribute(emisor, "Nombre", ""),
            tax_regime=get_attribute(emisor, "RegimenFiscal", ""),
        ),
        recipient=Recipient(
            tax_id=get_attribute(receptor, "Rfc", ""),
            legal_name=get_attribute(receptor, "Nombre", ""),
            usage_code=get_attribute(receptor, "UsoCFDI", ""),
        ),
        line_items=tuple(_line_item(node) for node in conceptos),
        tax_summary=_tax_summary(impuestos) if impuestos is not None else None,
        digital_stamp=Stamp(
            uuid=get_attribute(stamp, "UUID", ""),
            stamp_timestamp=get_attribute(stamp, "FechaTimbrado", ""),
            seal_value=get_attribute(stamp, "SelloCFD", ""),
            sat_certificate_number=get_attribute(stamp, "NoCertificadoSAT", ""),
        ),
    )


def _fail(error: CfdiError) -> NoReturn:
    LOGGER.info("Extracción interrumpida [%s]: %s", error.code, error.message)
    raise error


def _find_tax_summary(comprobante: etree._Element) -> etree._Element | None:
    # Line items carry their own Impuestos blocks; the invoice level one is a
    # direct child of the root.
    node = find_element(comprobante, "Impuestos", direct=True)
    if node is None:
        node = find_element(comprobante, "Impuestos")
    return node


def _line_item(node: etree._Element) -> LineItem:
    return LineItem(
        product_service_code=get_attribute(node, "ClaveProdServ", ""),
        quantity=get_attribute(node, "Cantidad", DEFAULT_QUANTITY),
        unit_code=get_attribute(node, "ClaveUnidad", ""),
        unit_label=get_attribute(node, "Unidad"),
        description=get_attribute(node, "Descripcion", ""),
        unit_value=get_attribute(node, "ValorUnitario", DEFAULT_AMOUNT),
        amount=get_attribute(node, "Importe", DEFAULT_AMOUNT),
    )


def _tax_summary(node: etree._Element) -> TaxSummary:
    transfers = tuple(
        TaxTransfer(
            tax_name=get_attribute(traslado, "Impuesto", ""),
            factor_type=get_attribute(traslado, "TipoFactor", ""),
            rate_or_fee=get_attribute(traslado, "TasaOCuota", ""),
            amount=get_attribute(traslado, "Importe", ""),
        )
        for traslado in find_all_elements(node, "Traslado")
    )
    return TaxSummary(
        total_transferred_taxes=get_attribute(node, "TotalImpuestosTrasladados"),
        transfers=transfers,
    )


__all__ = [
    "DEFAULT_AMOUNT",
    "DEFAULT_CURRENCY",
    "DEFAULT_QUANTITY",
    "DEFAULT_VERSION",
    "extract",
    "parse_cfdi",
]
