"""Element parsing: tag spec shorthand, attributes and child flattening."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Number
from typing import Any, Iterable, List, Optional, Tuple

from .errors import InvalidNodeError, InvalidTagSpec, UnsupportedAttributeValue
from .nodes import Element, Empty, Node, NodeList, classify

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

TAG_NAME_RE = re.compile(r"[^#.]*")
SEGMENT_RE = re.compile(r"([#.])([^#.]*)")
UNSAFE_NAME_RE = re.compile(r"[\s\"'<>/=]")


@dataclass(frozen=True)
class TagSpec:
    tag: str
    id: Optional[str] = None
    classes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ParsedElement:
    """An element resolved into everything the renderer needs.

    ``attributes`` is already in emission order (``class``, ``id``, then the
    rest by name) and holds unescaped string values.
    """

    tag: str
    id: Optional[str]
    classes: Tuple[str, ...]
    attributes: Tuple[Tuple[str, str], ...]
    children: Tuple[Node, ...]

    @property
    def void(self) -> bool:
        return self.tag in VOID_ELEMENTS


def parse_tag_spec(spec: str) -> TagSpec:
    """Split ``tag#id.class1.class2`` into its parts.

    Segments after the tag name may come in any order; classes keep the
    order they appear in. More than one ``#id`` is rejected.
    """
    if not isinstance(spec, str):
        raise InvalidNodeError(f"Tag position must hold a string, got {spec!r}")
    if not spec:
        raise InvalidTagSpec(spec, "empty tag spec")
    if any(ch.isspace() for ch in spec):
        raise InvalidTagSpec(spec, "whitespace is not allowed")

    tag = TAG_NAME_RE.match(spec).group(0)
    if not tag:
        raise InvalidTagSpec(spec, "missing tag name")
    if UNSAFE_NAME_RE.search(tag):
        raise InvalidTagSpec(spec, "tag name contains markup characters")

    element_id: Optional[str] = None
    classes: List[str] = []
    for marker, name in SEGMENT_RE.findall(spec[len(tag):]):
        if marker == "#":
            if not name:
                raise InvalidTagSpec(spec, "empty #id segment")
            if element_id is not None:
                raise InvalidTagSpec(spec, "more than one #id segment")
            element_id = name
        else:
            if not name:
                raise InvalidTagSpec(spec, "empty .class segment")
            classes.append(name)
    return TagSpec(tag=tag, id=element_id, classes=tuple(classes))


def attribute_value(name: str, value: Any) -> Optional[str]:
    """Return the string to emit for ``name``, or ``None`` to omit it."""
    if value is None or value is False:
        return None
    if value is True:
        return name
    if isinstance(value, str):
        return value
    if isinstance(value, Number):
        return str(value)
    raise UnsupportedAttributeValue(name, value)


def class_names(value: Any) -> List[str]:
    if value is None or value is False:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple)):
        names: List[str] = []
        for item in value:
            if item is None or item is False:
                continue
            if not isinstance(item, str):
                raise UnsupportedAttributeValue("class", value)
            names.extend(item.split())
        return names
    raise UnsupportedAttributeValue("class", value)


def _dedupe(names: Iterable[str]) -> Tuple[str, ...]:
    # dict keeps the first insertion position
    return tuple(dict.fromkeys(names))


def _check_list(node: NodeList) -> None:
    if node.items and isinstance(node.items[0], Mapping):
        raise InvalidNodeError(
            f"Attribute mapping without a tag name: {node.items[0]!r}"
        )


def _is_blank(node: Node) -> bool:
    return isinstance(node, Empty) or (isinstance(node, NodeList) and not node.items)


def flatten_children(items: Iterable[Any]) -> Tuple[Node, ...]:
    """Classify ``items`` and splice node lists into place, one level only.

    A non-empty node list found inside a spliced node list is kept as is;
    the renderer refuses it. Empty nodes and empty lists are dropped.
    """
    children: List[Node] = []
    for item in items:
        node = classify(item)
        if isinstance(node, NodeList):
            _check_list(node)
            for inner in node.items:
                inner_node = classify(inner)
                if isinstance(inner_node, NodeList):
                    _check_list(inner_node)
                children.append(inner_node)
        else:
            children.append(node)
    return tuple(child for child in children if not _is_blank(child))


def parse_element(value: Any) -> ParsedElement:
    if isinstance(value, Element):
        spec, items = value.spec, value.items
    elif isinstance(value, (list, tuple)) and value:
        spec, items = value[0], tuple(value[1:])
    else:
        raise InvalidNodeError(f"Not an element: {value!r}")

    tag_spec = parse_tag_spec(spec)

    attrs: Mapping[Any, Any] = {}
    if items and isinstance(items[0], Mapping):
        attrs, items = items[0], items[1:]

    for name in attrs:
        if not isinstance(name, str) or not name:
            raise InvalidNodeError(f"Attribute names must be non-empty strings, got {name!r}")
        if UNSAFE_NAME_RE.search(name):
            raise InvalidNodeError(f"Attribute name contains markup characters: {name!r}")

    classes = _dedupe([*tag_spec.classes, *class_names(attrs.get("class"))])
    element_id = tag_spec.id
    if element_id is None:
        element_id = attribute_value("id", attrs.get("id"))

    attributes: List[Tuple[str, str]] = []
    if classes:
        attributes.append(("class", " ".join(classes)))
    if element_id is not None:
        attributes.append(("id", element_id))
    for name in sorted(attrs):
        if name in ("class", "id"):
            continue
        rendered = attribute_value(name, attrs[name])
        if rendered is not None:
            attributes.append((name, rendered))

    children: Tuple[Node, ...] = ()
    if tag_spec.tag not in VOID_ELEMENTS:
        children = flatten_children(items)

    return ParsedElement(
        tag=tag_spec.tag,
        id=element_id,
        classes=classes,
        attributes=tuple(attributes),
        children=children,
    )


__all__ = [
    "ParsedElement",
    "TagSpec",
    "VOID_ELEMENTS",
    "attribute_value",
    "class_names",
    "flatten_children",
    "parse_element",
    "parse_tag_spec",
]
