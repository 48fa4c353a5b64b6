"""Node kinds and the classifier that maps plain values onto them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from numbers import Number
from typing import Any, Tuple, Union


@dataclass(frozen=True)
class Element:
    spec: str
    items: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class Text:
    value: Union[str, Number]


@dataclass(frozen=True)
class Raw:
    """Pre-formatted HTML that is emitted without escaping."""

    html: str


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class NodeList:
    items: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class Empty:
    pass


Node = Union[Element, Text, Raw, Comment, NodeList, Empty]

EMPTY = Empty()


def raw(html: str) -> Raw:
    """Mark ``html`` as trusted markup; it is never escaped."""
    return Raw(str(html))


def comment(text: str) -> Comment:
    """Wrap ``text`` as an HTML comment. ``-->`` inside ``text`` is not checked."""
    return Comment(str(text))


def classify(value: Any) -> Node:
    """Return the node kind for ``value``.

    Rules are checked in order:

    1. ``None`` and ``False`` are empty.
    2. strings and numbers are text (``True`` is not a number here).
    3. values built by :func:`raw` and :func:`comment` keep their kind.
    4. a list or tuple starting with a string is an element.
    5. any other list or tuple, and any iterator, is a node list.
    6. everything else (dicts, sets, ``True``, arbitrary objects) is empty.
    """
    if value is None or value is False:
        return EMPTY
    if isinstance(value, bool):
        return EMPTY
    if isinstance(value, (str, Number)):
        return Text(value)
    if isinstance(value, (Raw, Comment, Element, Text, NodeList, Empty)):
        return value
    if isinstance(value, (list, tuple)):
        if value and isinstance(value[0], str):
            return Element(value[0], tuple(value[1:]))
        return NodeList(tuple(value))
    if isinstance(value, Iterator):
        return NodeList(tuple(value))
    return EMPTY


__all__ = [
    "Comment",
    "EMPTY",
    "Element",
    "Empty",
    "Node",
    "NodeList",
    "Raw",
    "Text",
    "classify",
    "comment",
    "raw",
]
