"""Runtime loader for the SAT catalog labels shown by the viewer."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

_CATALOG_ENV_VAR = "CFDIMX_CATALOG_PATH"
_DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalogs.json"

_SECTIONS = ("document_kinds", "taxes", "factor_types", "usage_codes", "tax_regimes")


class CatalogLoaderError(RuntimeError):
    """Raised when the catalog file cannot be parsed."""


@dataclass(frozen=True)
class Catalogs:
    """Code to label mappings from the SAT catalogs used for display."""

    schema_version: str
    document_kinds: Mapping[str, str]
    taxes: Mapping[str, str]
    factor_types: Mapping[str, str]
    usage_codes: Mapping[str, str]
    tax_regimes: Mapping[str, str]

    def label(self, section: str, code: str) -> str:
        """Return the label for ``code`` in ``section`` or ``code`` itself."""

        mapping: Mapping[str, str] = getattr(self, section)
        return mapping.get(code, code)


_CACHED_CATALOGS: tuple[Path, float, Catalogs] | None = None


def _resolve_catalog_path() -> Path:
    candidate = os.getenv(_CATALOG_ENV_VAR)
    if candidate:
        return Path(candidate)
    return _DEFAULT_CATALOG_PATH


def _load_catalogs_from_disk(path: Path) -> Catalogs:
    if not path.exists():
        msg = f"Catalog file '{path}' not found"
        raise CatalogLoaderError(msg)

    with path.open("r", encoding="utf-8") as handle:
        try:
            payload: dict[str, Any] = json.load(handle)
        except json.JSONDecodeError as exc:
            msg = f"Catalog file '{path}' is not valid JSON"
            raise CatalogLoaderError(msg) from exc

    if not isinstance(payload, dict):
        raise CatalogLoaderError(f"Catalog file '{path}' must contain an object")

    sections: dict[str, Mapping[str, str]] = {}
    for name in _SECTIONS:
        raw = payload.get(name, {})
        if not isinstance(raw, dict):
            msg = f"Catalog section '{name}' must be an object"
            raise CatalogLoaderError(msg)
        sections[name] = MappingProxyType({str(k): str(v) for k, v in raw.items()})

    return Catalogs(schema_version=str(payload.get("schema_version", "")), **sections)


def load_catalogs(force_reload: bool = False) -> Catalogs:
    """Load the catalog file with caching keyed on path and mtime."""

    global _CACHED_CATALOGS

    path = _resolve_catalog_path()
    mtime = path.stat().st_mtime if path.exists() else 0.0

    if not force_reload and _CACHED_CATALOGS:
        cached_path, cached_mtime, cached = _CACHED_CATALOGS
        if cached_path == path and cached_mtime == mtime:
            return cached

    catalogs = _load_catalogs_from_disk(path)
    _CACHED_CATALOGS = (path, mtime, catalogs)
    return catalogs


__all__ = ["CatalogLoaderError", "Catalogs", "load_catalogs"]
