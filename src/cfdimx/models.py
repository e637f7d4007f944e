"""Immutable data structures produced by :mod:`cfdimx.extractor`."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import CfdiError


@dataclass(frozen=True)
class Issuer:
    """``Emisor`` block of the invoice."""

    tax_id: str
    legal_name: str
    tax_regime: str


@dataclass(frozen=True)
class Recipient:
    """``Receptor`` block of the invoice."""

    tax_id: str
    legal_name: str
    usage_code: str


@dataclass(frozen=True)
class LineItem:
    """One billed product or service (``Concepto``)."""

    product_service_code: str
    quantity: str
    unit_code: str
    unit_label: str | None
    description: str
    unit_value: str
    amount: str


@dataclass(frozen=True)
class TaxTransfer:
    """One transferred tax line (``Traslado``)."""

    tax_name: str
    factor_type: str
    rate_or_fee: str
    amount: str


@dataclass(frozen=True)
class TaxSummary:
    total_transferred_taxes: str | None
    transfers: tuple[TaxTransfer, ...] = ()


@dataclass(frozen=True)
class Stamp:
    """Tax authority certification (``TimbreFiscalDigital``)."""

    uuid: str
    stamp_timestamp: str
    seal_value: str
    sat_certificate_number: str


@dataclass(frozen=True)
class InvoiceRecord:
    """Display-ready view of a stamped CFDI.

    Amounts and rates are kept as the text found in the document; parsing them
    is left to the presentation layer.
    """

    schema_version: str
    series: str | None
    folio_number: str | None
    issue_timestamp: str
    document_kind: str
    currency_code: str
    subtotal_amount: str
    total_amount: str
    issuer: Issuer
    recipient: Recipient
    line_items: tuple[LineItem, ...]
    tax_summary: TaxSummary | None
    digital_stamp: Stamp

    def __post_init__(self) -> None:
        if not self.line_items:
            raise ValueError("InvoiceRecord requires at least one line item")


@dataclass(frozen=True)
class ExtractionOutcome:
    """Result of a parse call: exactly one of ``record`` or ``error`` is set."""

    record: InvoiceRecord | None = None
    error: CfdiError | None = None

    def __post_init__(self) -> None:
        if (self.record is None) == (self.error is None):
            raise ValueError("ExtractionOutcome needs either a record or an error")

    @property
    def ok(self) -> bool:
        return self.record is not None

    @classmethod
    def success(cls, record: InvoiceRecord) -> "ExtractionOutcome":
        return cls(record=record)

    @classmethod
    def failure(cls, error: CfdiError) -> "ExtractionOutcome":
        return cls(error=error)


__all__ = [
    "ExtractionOutcome",
    "InvoiceRecord",
    "Issuer",
    "LineItem",
    "Recipient",
    "Stamp",
    "TaxSummary",
    "TaxTransfer",
]
