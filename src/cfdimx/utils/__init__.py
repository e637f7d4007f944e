"""Utility helpers shared across cfdimx modules."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation


def parse_decimal(value: str | Decimal | None, *, default: Decimal | None = None) -> Decimal | None:
    """Convert the provided value to :class:`~decimal.Decimal`.

    Empty strings and values that are not numbers return ``default``; the
    amounts in an :class:`~cfdimx.models.InvoiceRecord` are raw text so the
    presentation code has to cope with both.
    """

    if value is None:
        return default
    if isinstance(value, Decimal):
        return value

    text = str(value).strip()
    if not text:
        return default

    try:
        number = Decimal(text)
    except (InvalidOperation, ValueError):
        return default
    if not number.is_finite():
        return default
    return number


__all__ = ["parse_decimal"]
