"""Exceptions raised while turning a node tree into HTML."""

from __future__ import annotations


class RenderError(ValueError):
    """Base class for every error raised by pyccup."""


class ParseError(RenderError):
    """A tag spec could not be parsed."""


class InvalidTagSpec(ParseError):
    """Malformed ``#``/``.`` shorthand in a tag spec string."""

    def __init__(self, spec: str, reason: str) -> None:
        super().__init__(f"Invalid tag spec {spec!r}: {reason}")
        self.spec = spec
        self.reason = reason


class InvalidNodeError(RenderError):
    """A value cannot be rendered as the node its position requires."""


class UnsupportedAttributeValue(RenderError):
    def __init__(self, name: str, value: object) -> None:
        super().__init__(
            f"Unsupported value for attribute {name!r}: {value!r} ({type(value).__name__})"
        )
        self.name = name
        self.value = value


__all__ = [
    "InvalidNodeError",
    "InvalidTagSpec",
    "ParseError",
    "RenderError",
    "UnsupportedAttributeValue",
]
