"""Pydantic models for command-line rendering options."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class RenderOptions(BaseModel):
    """How a tree file is turned into an HTML document."""

    pretty: bool = Field(
        False, description="Indent nested elements by two spaces per level."
    )
    doctype: bool = Field(
        False, description="Prepend <!DOCTYPE html> to the rendered output."
    )
    trailing_newline: bool = Field(
        True,
        alias="trailingNewline",
        description="End the written document with a newline.",
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def load_render_options(path: Path) -> RenderOptions:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of render options.")
    try:
        return RenderOptions.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid render options in {path}: {exc}") from exc
