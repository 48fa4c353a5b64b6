"""CLI for rendering a YAML/JSON node tree file to HTML."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml

from .config import RenderOptions, load_render_options
from .errors import RenderError
from .io_utils import load_tree, warn, write_text
from .renderer import render, render_pretty

DOCTYPE = "<!DOCTYPE html>"


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a YAML/JSON node tree to HTML")
    parser.add_argument("tree", type=Path, help="Path to the YAML or JSON tree file")
    parser.add_argument("--out", type=Path, help="Output HTML file (defaults to stdout)")
    parser.add_argument("--config", type=Path, help="YAML file with render options")
    parser.add_argument(
        "--pretty",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Indent nested elements by two spaces per level",
    )
    parser.add_argument(
        "--doctype",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Prepend <!DOCTYPE html> to the output",
    )
    return parser.parse_args(argv)


def _resolve_options(args: argparse.Namespace) -> RenderOptions:
    options = load_render_options(args.config) if args.config else RenderOptions()
    overrides = {
        key: value
        for key, value in (("pretty", args.pretty), ("doctype", args.doctype))
        if value is not None
    }
    return options.model_copy(update=overrides)


def render_document(tree: object, options: RenderOptions) -> str:
    """Render ``tree`` into a full document string according to ``options``."""
    body = render_pretty(tree) if options.pretty else render(tree)
    if options.doctype:
        body = f"{DOCTYPE}\n{body}" if body else DOCTYPE
    if options.trailing_newline and body:
        body += "\n"
    return body


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    options = _resolve_options(args)

    if not args.tree.exists():
        raise SystemExit(f"Tree file not found: {args.tree}")
    try:
        tree = load_tree(args.tree)
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid tree file {args.tree}: {exc}") from exc

    if tree is None:
        warn(f"{args.tree} is empty; it renders nothing")

    try:
        output = render_document(tree, options)
    except RenderError as exc:
        print(f"{args.tree}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.out:
        write_text(args.out, output)
    else:
        sys.stdout.write(output)


if __name__ == "__main__":
    main()
