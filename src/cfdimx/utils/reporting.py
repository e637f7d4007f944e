"""Write an :class:`~cfdimx.models.InvoiceRecord` to an Excel workbook."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook

from ..models import InvoiceRecord
from . import parse_decimal


def _cell(amount: str):
    """Numbers go in as :class:`~decimal.Decimal`, anything else as text."""

    value = parse_decimal(amount)
    return amount if value is None else value


def default_report_destination(source: Path) -> Path:
    """Return the report path placed next to ``source``."""

    return source.with_name(f"{source.stem}_cfdi.xlsx")


def write_invoice_workbook(record: InvoiceRecord, destination: Path) -> Path:
    """Generate a workbook with the header, line items and taxes of ``record``."""

    destination.parent.mkdir(parents=True, exist_ok=True)

    workbook = Workbook()
    header_ws = workbook.active
    header_ws.title = "Comprobante"
    header_ws.append(["Campo", "Valor"])
    rows = [
        ("Versión", record.schema_version),
        ("Serie", record.series),
        ("Folio", record.folio_number),
        ("Fecha", record.issue_timestamp),
        ("Tipo de comprobante", record.document_kind),
        ("Moneda", record.currency_code),
        ("Subtotal", _cell(record.subtotal_amount)),
        ("Total", _cell(record.total_amount)),
        ("RFC emisor", record.issuer.tax_id),
        ("Nombre emisor", record.issuer.legal_name),
        ("Régimen fiscal", record.issuer.tax_regime),
        ("RFC receptor", record.recipient.tax_id),
        ("Nombre receptor", record.recipient.legal_name),
        ("Uso CFDI", record.recipient.usage_code),
        ("UUID", record.digital_stamp.uuid),
        ("Fecha de timbrado", record.digital_stamp.stamp_timestamp),
        ("No. certificado SAT", record.digital_stamp.sat_certificate_number),
    ]
    for row in rows:
        header_ws.append(list(row))

    items_ws = workbook.create_sheet(title="Conceptos")
    items_ws.append(
        [
            "Clave producto",
            "Cantidad",
            "Clave unidad",
            "Unidad",
            "Descripción",
            "Valor unitario",
            "Importe",
        ]
    )
    for item in record.line_items:
        items_ws.append(
            [
                item.product_service_code,
                _cell(item.quantity),
                item.unit_code,
                item.unit_label,
                item.description,
                _cell(item.unit_value),
                _cell(item.amount),
            ]
        )

    taxes_ws = workbook.create_sheet(title="Impuestos")
    taxes_ws.append(["Impuesto", "Tipo factor", "Tasa o cuota", "Importe"])
    summary = record.tax_summary
    if summary is not None:
        for transfer in summary.transfers:
            taxes_ws.append(
                [
                    transfer.tax_name,
                    transfer.factor_type,
                    transfer.rate_or_fee,
                    _cell(transfer.amount),
                ]
            )
        if summary.total_transferred_taxes:
            taxes_ws.append([])
            taxes_ws.append(
                ["Total trasladados", None, None, _cell(summary.total_transferred_taxes)]
            )

    workbook.save(destination)
    return destination


__all__ = ["default_report_destination", "write_invoice_workbook"]
