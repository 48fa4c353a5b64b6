"""Render HTML from plain Python data: tag specs, attribute dicts and children."""

from .errors import (
    InvalidNodeError,
    InvalidTagSpec,
    ParseError,
    RenderError,
    UnsupportedAttributeValue,
)
from .nodes import comment, raw
from .parser import parse_tag_spec
from .renderer import render, render_pretty

__all__ = [
    "InvalidNodeError",
    "InvalidTagSpec",
    "ParseError",
    "RenderError",
    "UnsupportedAttributeValue",
    "comment",
    "parse_tag_spec",
    "raw",
    "render",
    "render_pretty",
]
