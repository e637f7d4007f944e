"""Argument handling shared by the cfdimx commands."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..logging import configure_logging
from ..models import ExtractionOutcome
from ..session import ViewerSession


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("cfdi", type=Path, help="Ruta al archivo XML del CFDI")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Mostrar mensajes de diagnóstico (repetir para más detalle)",
    )
    parser.add_argument("--log-file", type=Path, default=None, help=argparse.SUPPRESS)


def load(args: argparse.Namespace) -> ExtractionOutcome:
    """Configure logging from ``args`` and load the requested CFDI."""

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    configure_logging(level, args.log_file)

    session = ViewerSession()
    try:
        outcome = session.load_file(args.cfdi)
    except OSError as exc:
        print(f"No se pudo leer '{args.cfdi}': {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    if not outcome.ok:
        print(session.error_message, file=sys.stderr)
    return outcome
