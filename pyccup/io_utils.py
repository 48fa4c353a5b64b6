"""Utility helpers for tree files, output and warnings."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Union

import yaml

from .nodes import comment, raw

PathLike = Union[str, Path]


class TreeLoader(yaml.SafeLoader):
    """Safe YAML loader that understands ``!raw`` and ``!comment`` tags."""


def _construct_raw(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    return raw(loader.construct_scalar(node))


def _construct_comment(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    return comment(loader.construct_scalar(node))


TreeLoader.add_constructor("!raw", _construct_raw)
TreeLoader.add_constructor("!comment", _construct_comment)


def parse_tree(text: str) -> Any:
    """Parse a YAML or JSON document into a node tree."""
    return yaml.load(text, Loader=TreeLoader)


def load_tree(path: PathLike) -> Any:
    return parse_tree(Path(path).read_text(encoding="utf-8"))


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["TreeLoader", "load_tree", "parse_tree", "warn", "write_text"]
