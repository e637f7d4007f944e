"""Generate an Excel workbook from a CFDI."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from ..utils.reporting import default_report_destination, write_invoice_workbook
from ._common import add_common_arguments, load


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Genera un libro de Excel con los datos, conceptos e impuestos del CFDI."
    )
    add_common_arguments(parser)
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Archivo de destino (por omisión, junto al XML)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    outcome = load(args)
    if not outcome.ok:
        return 1
    destination = args.output or default_report_destination(args.cfdi)
    write_invoice_workbook(outcome.record, destination)
    print(f"Reporte guardado en: {destination}")
    return 0


if __name__ == "__main__":  # pragma: no cover - ejecución directa
    raise SystemExit(main())
