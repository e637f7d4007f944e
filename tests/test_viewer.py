from __future__ import annotations

import pytest

from cfdimx.config import load_catalogs
from cfdimx.models import (
    InvoiceRecord,
    Issuer,
    LineItem,
    Recipient,
    Stamp,
    TaxSummary,
    TaxTransfer,
)
from cfdimx.viewer import (
    document_kind_label,
    format_currency,
    format_rate,
    format_timestamp,
    render_text,
    tax_label,
)


def _record(tax_summary: TaxSummary | None = None, **overrides) -> InvoiceRecord:
    values = dict(
        schema_version="4.0",
        series="A",
        folio_number="99",
        issue_timestamp="2024-03-05T12:30:00",
        document_kind="I",
        currency_code="MXN",
        subtotal_amount="1000.00",
        total_amount="1160.00",
        issuer=Issuer("EKU9003173C9", "ESCUELA KEMPER URGATE", "601"),
        recipient=Recipient("XAXX010101000", "PUBLICO EN GENERAL", "S01"),
        line_items=(
            LineItem("84111506", "1", "E48", None, "Servicio contable", "1000.00", "1000.00"),
        ),
        tax_summary=tax_summary,
        digital_stamp=Stamp("UUID-1", "2024-03-05T12:31:10", "sello", "00001000000509846663"),
    )
    values.update(overrides)
    return InvoiceRecord(**values)


@pytest.mark.parametrize(
    ("amount", "currency", "expected"),
    [
        ("1234.5", "MXN", "$1,234.50"),
        ("0", "MXN", "$0.00"),
        ("-18.005", "MXN", "-$18.01"),
        ("99.99", "USD", "USD 99.99"),
        ("n/a", "MXN", "n/a"),
        ("", "MXN", ""),
    ],
)
def test_format_currency(amount, currency, expected):
    assert format_currency(amount, currency) == expected


@pytest.mark.parametrize(
    ("rate", "factor", "expected"),
    [
        ("0.160000", "Tasa", "16%"),
        ("0.080000", "Tasa", "8%"),
        ("0.265000", "Tasa", "26.5%"),
        ("0.000000", "Tasa", "0%"),
        ("1.500000", "Cuota", "1.500000"),
        ("", "Exento", ""),
    ],
)
def test_format_rate(rate, factor, expected):
    assert format_rate(rate, factor) == expected


def test_format_timestamp():
    assert format_timestamp("2024-03-05T12:30:00") == "5 de marzo de 2024, 12:30"
    assert format_timestamp("not a date") == "not a date"
    assert format_timestamp("") == ""


def test_catalog_labels():
    catalogs = load_catalogs()

    assert document_kind_label("I", catalogs) == "Ingreso"
    assert document_kind_label("P", catalogs) == "Pago"
    assert document_kind_label("Z", catalogs) == "Z"
    assert tax_label("002", catalogs) == "IVA"
    assert tax_label("999", catalogs) == "999"


def test_render_text_without_taxes():
    text = render_text(_record())

    assert "Ingreso • Versión 4.0" in text
    assert "Serie: A" in text
    assert "Folio: 99" in text
    assert "UUID: UUID-1" in text
    assert "Régimen Fiscal: 601 - General de Ley Personas Morales" in text
    assert "Uso CFDI: S01 - Sin efectos fiscales" in text
    assert "1 E48 | Servicio contable (Clave: 84111506) | $1,000.00 | $1,000.00" in text
    assert "Impuestos" not in text
    assert "Total: $1,160.00" in text
    assert "No. Certificado SAT: 00001000000509846663" in text


def test_render_text_with_taxes():
    summary = TaxSummary(
        total_transferred_taxes="160.00",
        transfers=(TaxTransfer("002", "Tasa", "0.160000", "160.00"),),
    )

    text = render_text(_record(tax_summary=summary, series=None))

    assert "Serie:" not in text
    assert "IVA (16%): $160.00" in text
    assert "  Impuestos: $160.00" in text


def test_render_text_prefers_unit_label():
    item = LineItem("50211503", "2", "H87", "Pieza", "Cigarros", "50.00", "100.00")

    text = render_text(_record(line_items=(item,)))

    assert "2 Pieza | Cigarros" in text


def test_render_does_not_mutate_record():
    record = _record()
    before = (record, hash(record))

    render_text(record)

    assert (record, hash(record)) == before
