"""Print the text view of a CFDI."""

from __future__ import annotations

import argparse
from typing import Sequence

from ..viewer import render_text
from ._common import add_common_arguments, load


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Muestra el contenido de un CFDI.")
    add_common_arguments(parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    outcome = load(args)
    if not outcome.ok:
        return 1
    print(render_text(outcome.record))
    return 0


if __name__ == "__main__":  # pragma: no cover - ejecución directa
    raise SystemExit(main())
