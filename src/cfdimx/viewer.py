"""Read-only text rendering of an :class:`~cfdimx.models.InvoiceRecord`.

Nothing here changes the record: every helper takes the raw text kept by the
extractor and turns it into something readable, returning the original text
whenever it cannot be interpreted.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from .config import Catalogs, load_catalogs
from .models import InvoiceRecord
from .utils import parse_decimal

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")

_MONTHS = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)


def format_currency(amount: str, currency: str = "MXN") -> str:
    """Format ``amount`` the way es-MX displays money (``$1,234.56``)."""

    value = parse_decimal(amount)
    if value is None:
        return amount
    value = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"
    symbol = "$" if (currency or "MXN") == "MXN" else f"{currency} "
    return f"{sign}{symbol}{digits}"


def format_rate(rate: str, factor_type: str = "Tasa") -> str:
    """Show a ``TasaOCuota`` value; rates become percentages (``16%``)."""

    value = parse_decimal(rate)
    if value is None or factor_type == "Cuota":
        return rate
    percent = value * HUNDRED
    if percent == percent.to_integral():
        return f"{int(percent)}%"
    text = f"{percent.normalize():f}"
    return f"{text}%"


def format_timestamp(text: str) -> str:
    """Render an ISO timestamp as a long Spanish date."""

    if not text:
        return text
    try:
        moment = datetime.fromisoformat(text)
    except ValueError:
        return text
    month = _MONTHS[moment.month - 1]
    return f"{moment.day} de {month} de {moment.year}, {moment:%H:%M}"


def document_kind_label(code: str, catalogs: Catalogs | None = None) -> str:
    catalogs = catalogs or load_catalogs()
    return catalogs.label("document_kinds", code)


def tax_label(code: str, catalogs: Catalogs | None = None) -> str:
    catalogs = catalogs or load_catalogs()
    return catalogs.label("taxes", code)


def _with_label(code: str, label: str) -> str:
    if not code or label == code:
        return code
    return f"{code} - {label}"


def render_text(record: InvoiceRecord, catalogs: Catalogs | None = None) -> str:
    """Return the full text view of ``record``."""

    catalogs = catalogs or load_catalogs()
    currency = record.currency_code

    def money(amount: str) -> str:
        return format_currency(amount, currency)

    lines: list[str] = [
        "Comprobante Fiscal Digital por Internet",
        f"{document_kind_label(record.document_kind, catalogs)} • Versión {record.schema_version}",
    ]
    if record.series:
        lines.append(f"Serie: {record.series}")
    if record.folio_number:
        lines.append(f"Folio: {record.folio_number}")
    lines.extend(
        [
            f"Fecha de Emisión: {format_timestamp(record.issue_timestamp)}",
            f"UUID: {record.digital_stamp.uuid}",
            "",
            "Emisor",
            f"  RFC: {record.issuer.tax_id}",
            f"  Nombre: {record.issuer.legal_name}",
            "  Régimen Fiscal: "
            + _with_label(
                record.issuer.tax_regime,
                catalogs.label("tax_regimes", record.issuer.tax_regime),
            ),
            "",
            "Receptor",
            f"  RFC: {record.recipient.tax_id}",
            f"  Nombre: {record.recipient.legal_name}",
            "  Uso CFDI: "
            + _with_label(
                record.recipient.usage_code,
                catalogs.label("usage_codes", record.recipient.usage_code),
            ),
            "",
            "Conceptos",
        ]
    )

    for item in record.line_items:
        unit = item.unit_label or item.unit_code
        lines.append(
            f"  {item.quantity} {unit} | {item.description} (Clave: {item.product_service_code})"
            f" | {money(item.unit_value)} | {money(item.amount)}"
        )

    summary = record.tax_summary
    if summary is not None and summary.transfers:
        lines.extend(["", "Impuestos"])
        for transfer in summary.transfers:
            rate = format_rate(transfer.rate_or_fee, transfer.factor_type)
            lines.append(
                f"  {tax_label(transfer.tax_name, catalogs)} ({rate}): {money(transfer.amount)}"
            )

    lines.extend(["", "Totales", f"  Subtotal: {money(record.subtotal_amount)}"])
    if summary is not None and summary.total_transferred_taxes:
        lines.append(f"  Impuestos: {money(summary.total_transferred_taxes)}")
    lines.append(f"  Total: {money(record.total_amount)}")

    stamp = record.digital_stamp
    lines.extend(
        [
            "",
            "Timbre Fiscal Digital",
            f"  Fecha de Timbrado: {format_timestamp(stamp.stamp_timestamp)}",
            f"  No. Certificado SAT: {stamp.sat_certificate_number}",
        ]
    )
    return "\n".join(lines)


__all__ = [
    "document_kind_label",
    "format_currency",
    "format_rate",
    "format_timestamp",
    "render_text",
    "tax_label",
]
