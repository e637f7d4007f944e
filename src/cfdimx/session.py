"""State holder for a viewer showing one CFDI at a time."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import CfdiError, UnsupportedInputError
from .extractor import parse_cfdi
from .models import ExtractionOutcome, InvoiceRecord

LOGGER = logging.getLogger("cfdimx.session")

XML_SUFFIX = ".xml"


class ViewerSession:
    """Keeps the record or the error of the last loaded document.

    A successful load clears the previous error and a failed one clears the
    previous record, so callers never see both at once.
    """

    def __init__(self) -> None:
        self.record: InvoiceRecord | None = None
        self.error: CfdiError | None = None

    @property
    def error_message(self) -> str:
        return self.error.message if self.error is not None else ""

    def load_text(self, filename: str, text: str | bytes) -> ExtractionOutcome:
        """Load ``text`` read from ``filename`` and return the outcome."""

        if not filename.lower().endswith(XML_SUFFIX):
            outcome = ExtractionOutcome.failure(UnsupportedInputError())
        else:
            outcome = parse_cfdi(text)
        return self._apply(filename, outcome)

    def load_file(self, path: Path) -> ExtractionOutcome:
        """Read ``path`` from disk and load it."""

        path = Path(path)
        if path.suffix.lower() != XML_SUFFIX:
            return self._apply(path.name, ExtractionOutcome.failure(UnsupportedInputError()))
        return self.load_text(path.name, path.read_bytes())

    def reset(self) -> None:
        self.record = None
        self.error = None

    def _apply(self, filename: str, outcome: ExtractionOutcome) -> ExtractionOutcome:
        if outcome.ok:
            self.record = outcome.record
            self.error = None
            LOGGER.info("CFDI '%s' cargado.", filename)
        else:
            self.record = None
            self.error = outcome.error
            LOGGER.warning("CFDI '%s' rechazado: %s", filename, self.error_message)
        return outcome


__all__ = ["ViewerSession", "XML_SUFFIX"]
