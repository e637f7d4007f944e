"""Command line entry points for the CFDI viewer."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from .commands import check, report, show

CommandCallable = Callable[[list[str] | None], int | None]


@dataclass(frozen=True)
class CommandSpec:
    """Metadata describing a CLI command exposed by :mod:`cfdimx.cli`."""

    name: str
    summary: str
    handler: CommandCallable

    def run(self, argv: list[str] | None) -> int:
        """Execute the command and normalise the resulting exit code."""

        try:
            result = self.handler(argv)
        except SystemExit as exc:  # argparse exits on --help and bad arguments
            code = exc.code
            if code is None:
                return 0
            if isinstance(code, int):
                return code
            print(str(code), file=sys.stderr)
            return 1
        if result is None:
            return 0
        return int(result)


_COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(
        name="show",
        summary="Muestra el contenido de un CFDI en texto.",
        handler=show.main,
    ),
    CommandSpec(
        name="check",
        summary="Verifica que el XML sea un CFDI timbrado y completo.",
        handler=check.main,
    ),
    CommandSpec(
        name="report",
        summary="Genera un libro de Excel con los datos del CFDI.",
        handler=report.main,
    ),
)

_COMMAND_INDEX: Mapping[str, CommandSpec] = {spec.name: spec for spec in _COMMANDS}


def build_parser() -> argparse.ArgumentParser:
    """Return the base argument parser shared across commands."""

    parser = argparse.ArgumentParser(description="Visor de CFDI")
    subparsers = parser.add_subparsers(dest="command", metavar="comando")
    subparsers.required = True

    for spec in _COMMANDS:
        subparser = subparsers.add_parser(
            spec.name,
            help=spec.summary,
            description=spec.summary,
            add_help=False,
        )
        subparser.add_argument("args", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)

    return parser


def _normalise_args(namespace: argparse.Namespace) -> tuple[str, list[str]]:
    command = getattr(namespace, "command")
    remainder = getattr(namespace, "args", [])
    return command, list(remainder)


def run(command: str, argv: Sequence[str] | None = None) -> int:
    """Execute *command* forwarding ``argv`` to the underlying handler."""

    spec = _COMMAND_INDEX.get(command)
    if spec is None:
        raise ValueError(f"Comando desconocido: {command}")
    return spec.run(list(argv or []))


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the command line interface."""

    parser = build_parser()
    namespace, extras = parser.parse_known_args(argv)
    command, remainder = _normalise_args(namespace)
    return run(command, remainder + extras)


if __name__ == "__main__":  # pragma: no cover - ejecución directa
    raise SystemExit(main())
