"""Check whether a file is a readable, stamped CFDI."""

from __future__ import annotations

import argparse
from typing import Sequence

from ._common import add_common_arguments, load


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Verifica la estructura de un CFDI: timbre fiscal, emisor, receptor "
            "y al menos un concepto."
        )
    )
    add_common_arguments(parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    outcome = load(args)
    if not outcome.ok:
        return 1
    print(f"CFDI válido: {outcome.record.digital_stamp.uuid}")
    return 0


if __name__ == "__main__":  # pragma: no cover - ejecución directa
    raise SystemExit(main())
