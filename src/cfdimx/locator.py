"""Namespace tolerant element lookup for CFDI documents.

CFDI producers disagree on namespace prefixes (``cfdi:``, ``tfd:``, default
namespaces or none at all) and a few of them emit lower camel case names. The
helpers in this module hide those differences: callers ask for the canonical
name (``Comprobante``, ``TimbreFiscalDigital``) and the lookup walks an ordered
list of match strategies until one of them yields a node.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Union

from lxml import etree

from .errors import MalformedDocumentError

LOGGER = logging.getLogger("cfdimx.locator")

NS_CFDI_40 = "http://www.sat.gob.mx/cfd/4"
NS_CFDI_33 = "http://www.sat.gob.mx/cfd/3"
NS_TFD = "http://www.sat.gob.mx/TimbreFiscalDigital"

CFDI_NAMESPACES = frozenset({NS_CFDI_40, NS_CFDI_33, NS_TFD})

Scope = Union[etree._ElementTree, etree._Element]


def lower_first(name: str) -> str:
    """Return ``name`` with its first character in lowercase."""

    return name[:1].lower() + name[1:]


@dataclass(frozen=True)
class MatchStrategy:
    """A named predicate deciding whether an element answers to a logical name."""

    name: str
    matches: Callable[[etree._Element, str], bool]


def _canonical(element: etree._Element, logical_name: str) -> bool:
    """Match the exact local name in a SAT namespace or in no namespace.

    Elements under any other namespace URI are left to the last strategy, so
    in a document whose invoice nodes use a foreign namespace an unqualified
    element of the same name (for instance inside an addenda) takes
    precedence over them.
    """

    qname = etree.QName(element)
    if qname.localname != logical_name:
        return False
    return qname.namespace is None or qname.namespace in CFDI_NAMESPACES


def _lowercase(element: etree._Element, logical_name: str) -> bool:
    variant = lower_first(logical_name)
    return variant != logical_name and etree.QName(element).localname == variant


def _any_namespace(element: etree._Element, logical_name: str) -> bool:
    return etree.QName(element).localname == logical_name


STRATEGIES: tuple[MatchStrategy, ...] = (
    MatchStrategy("canonical", _canonical),
    MatchStrategy("lowercase", _lowercase),
    MatchStrategy("any-namespace", _any_namespace),
)


def parse_document(text: str | bytes) -> etree._ElementTree:
    """Parse ``text`` into an element tree.

    ``str`` input is treated as UTF-8 regardless of the encoding declared in
    the prolog. The text, attribute and depth limits of libxml2 are lifted
    so addenda embedding whole PDFs still parse. Raises
    :class:`MalformedDocumentError` when the input is not well-formed XML.
    """

    if isinstance(text, str):
        data = text.encode("utf-8")
        parser = etree.XMLParser(
            encoding="utf-8", resolve_entities=False, no_network=True, huge_tree=True
        )
    else:
        data = text
        parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)

    try:
        root = etree.fromstring(data, parser=parser)
    except (etree.XMLSyntaxError, ValueError) as exc:
        LOGGER.debug("XML inválido: %s", exc)
        raise MalformedDocumentError() from exc
    if root is None:
        raise MalformedDocumentError()
    return etree.ElementTree(root)


def _iter_candidates(scope: Scope, direct: bool) -> Iterator[etree._Element]:
    if isinstance(scope, etree._ElementTree):
        root = scope.getroot()
        if direct:
            yield root
            return
        yield from root.iter(tag=etree.Element)
        return
    if direct:
        yield from scope.iterchildren(tag=etree.Element)
    else:
        yield from scope.iterdescendants(tag=etree.Element)


def find_all_elements(
    scope: Scope, logical_name: str, *, direct: bool = False
) -> list[etree._Element]:
    """Return every element matching ``logical_name`` under ``scope``.

    Strategies are tried in the order of :data:`STRATEGIES`; the first one that
    matches anything decides the result, which keeps document order. A tree
    scope includes its document element, an element scope only its
    descendants (or children when ``direct`` is set).
    """

    candidates = list(_iter_candidates(scope, direct))
    for strategy in STRATEGIES:
        found = [node for node in candidates if strategy.matches(node, logical_name)]
        if found:
            LOGGER.debug(
                "'%s' resuelto por la estrategia %s (%d nodos)",
                logical_name,
                strategy.name,
                len(found),
            )
            return found
    return []


def find_element(
    scope: Scope, logical_name: str, *, direct: bool = False
) -> etree._Element | None:
    """Return the first element matching ``logical_name`` or ``None``."""

    found = find_all_elements(scope, logical_name, direct=direct)
    return found[0] if found else None


def _attribute_candidates(logical_name: str) -> tuple[str, ...]:
    candidates = [logical_name, lower_first(logical_name)]
    if logical_name.isupper():
        candidates.append(logical_name.lower())
    return tuple(dict.fromkeys(candidates))


def get_attribute(
    node: etree._Element, logical_name: str, default: str | None = None
) -> str | None:
    """Read ``logical_name`` from ``node`` with the casing fallback.

    The PascalCase name wins over its lower camel case variant. Acronyms such
    as ``UUID`` are also tried fully lowercased. Empty values count as
    missing, so ``default`` is returned when no candidate is filled in.
    """

    for candidate in _attribute_candidates(logical_name):
        value = node.get(candidate)
        if value:
            return value
    return default


__all__ = [
    "CFDI_NAMESPACES",
    "MatchStrategy",
    "NS_CFDI_33",
    "NS_CFDI_40",
    "NS_TFD",
    "STRATEGIES",
    "find_all_elements",
    "find_element",
    "get_attribute",
    "lower_first",
    "parse_document",
]
