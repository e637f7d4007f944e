"""Error taxonomy for CFDI extraction.

Every failure carries a stable ``code`` and a ``message`` that is shown to the
end user verbatim.
"""

from __future__ import annotations


class CfdiError(Exception):
    """Base class for every error raised while reading a CFDI."""

    code = "CFDI_ERROR"
    default_message = "Error al procesar el archivo CFDI"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedDocumentError(CfdiError):
    """The input text is not well-formed XML."""

    code = "MALFORMED_DOCUMENT"
    default_message = "El archivo XML no está bien formado"


class MissingStampError(CfdiError):
    """No ``TimbreFiscalDigital`` element exists in the document."""

    code = "MISSING_STAMP"
    default_message = (
        "Este XML no parece ser un CFDI válido (no se encontró TimbreFiscalDigital)"
    )


class MissingIssuerError(CfdiError):
    code = "MISSING_ISSUER"
    default_message = "No se encontró información del emisor"


class MissingRecipientError(CfdiError):
    code = "MISSING_RECIPIENT"
    default_message = "No se encontró información del receptor"


class NoLineItemsError(CfdiError):
    code = "NO_LINE_ITEMS"
    default_message = "No se encontraron conceptos en el CFDI"


class UnsupportedInputError(CfdiError):
    """Raised by callers before parsing when the file is not an XML file."""

    code = "UNSUPPORTED_INPUT"
    default_message = "Por favor selecciona un archivo XML válido"


__all__ = [
    "CfdiError",
    "MalformedDocumentError",
    "MissingIssuerError",
    "MissingRecipientError",
    "MissingStampError",
    "NoLineItemsError",
    "UnsupportedInputError",
]
