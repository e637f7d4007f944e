"""Top level package for the CFDI viewer.

The core API turns the XML of a stamped CFDI into an immutable
:class:`~cfdimx.models.InvoiceRecord`::

    from cfdimx import parse_cfdi

    outcome = parse_cfdi(xml_text)
    if outcome.ok:
        print(outcome.record.digital_stamp.uuid)
    else:
        print(outcome.error.message)
"""

from .errors import (
    CfdiError,
    MalformedDocumentError,
    MissingIssuerError,
    MissingRecipientError,
    MissingStampError,
    NoLineItemsError,
    UnsupportedInputError,
)
from .extractor import extract, parse_cfdi
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

__all__ = [
    "CfdiError",
    "ExtractionOutcome",
    "InvoiceRecord",
    "Issuer",
    "LineItem",
    "MalformedDocumentError",
    "MissingIssuerError",
    "MissingRecipientError",
    "MissingStampError",
    "NoLineItemsError",
    "Recipient",
    "Stamp",
    "TaxSummary",
    "TaxTransfer",
    "UnsupportedInputError",
    "extract",
    "find_all_elements",
    "find_element",
    "get_attribute",
    "parse_cfdi",
    "parse_document",
]
