"""Whole-kit downloads: Markdown and a standalone HTML page."""

from __future__ import annotations

import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from recruit_kit.models.analysis import ResumeAnalysis
from recruit_kit.models.hiring_kit import HiringKit
from recruit_kit.rendering.markdown import to_html

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _environment(autoescape: bool) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=autoescape,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["md"] = to_html
    return env


def render_kit_markdown(
    kit: HiringKit,
    analysis: ResumeAnalysis | None = None,
    title: str = "Hiring Kit",
) -> str:
    """Render the kit (and screening result, if any) as one Markdown document."""
    template = _environment(autoescape=False).get_template("hiring_kit.md.j2")
    return template.render(kit=kit, analysis=analysis, title=title).strip() + "\n"


def render_kit_html(
    kit: HiringKit,
    analysis: ResumeAnalysis | None = None,
    title: str = "Hiring Kit",
) -> str:
    """Render the kit as a self-contained HTML page with all text escaped."""
    template = _environment(autoescape=True).get_template("hiring_kit.html")
    return template.render(kit=kit, analysis=analysis, title=title)


def export_filename(notes: str, extension: str) -> str:
    """Derive a download file name from the first line of the role notes."""
    first_line = notes.strip().splitlines()[0] if notes.strip() else ""
    first_line = first_line.removeprefix("Role:").strip()
    slug = re.sub(r"[^A-Za-z0-9]+", "_", first_line).strip("_").lower()
    return f"{slug or 'hiring_kit'}.{extension}"
