"""Live HTML preview of an editor document."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

if TYPE_CHECKING:
    from career_canvas.models.blocks import Document

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["entry_heading"] = _entry_heading
    return env


def _entry_heading(entry: object) -> str:
    heading = (
        getattr(entry, "title", "") or getattr(entry, "degree", "") or getattr(entry, "name", "")
    )
    company = getattr(entry, "company", "")
    return f"{heading} @ {company}" if heading and company else heading


def render_preview(document: Document) -> str:
    """Render the document as a standalone HTML resume."""
    return _environment().get_template("preview.html").render(blocks=document)
