"""Small markdown subset: headings, bullet items and **bold** runs.

Model output is parsed into a tree of tagged nodes first and rendered to
HTML second, with every piece of text escaped on the way out. Anything the
parser does not recognise stays literal text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from markupsafe import Markup, escape

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*)$")
_LIST_ITEM_RE = re.compile(r"^[-*•]\s+(.*)$")
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Bold:
    value: str


Inline = Union[Text, Bold]


@dataclass(frozen=True)
class Heading:
    level: int
    children: tuple[Inline, ...]


@dataclass(frozen=True)
class ListItem:
    children: tuple[Inline, ...]


@dataclass(frozen=True)
class Paragraph:
    children: tuple[Inline, ...]


Block = Union[Heading, ListItem, Paragraph]


def parse_inline(text: str) -> tuple[Inline, ...]:
    nodes: list[Inline] = []
    pos = 0
    for m in _BOLD_RE.finditer(text):
        if m.start() > pos:
            nodes.append(Text(text[pos : m.start()]))
        nodes.append(Bold(m.group(1)))
        pos = m.end()
    if pos < len(text):
        nodes.append(Text(text[pos:]))
    return tuple(nodes)


def parse(text: str) -> list[Block]:
    """Parse markdown text into blocks, one per non-blank line."""
    blocks: list[Block] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if m := _HEADING_RE.match(line):
            blocks.append(Heading(level=len(m.group(1)), children=parse_inline(m.group(2))))
        elif m := _LIST_ITEM_RE.match(line):
            blocks.append(ListItem(children=parse_inline(m.group(1))))
        else:
            blocks.append(Paragraph(children=parse_inline(line)))
    return blocks


def _render_inline(nodes: tuple[Inline, ...]) -> str:
    parts = []
    for node in nodes:
        if isinstance(node, Bold):
            parts.append(f"<strong>{escape(node.value)}</strong>")
        else:
            parts.append(str(escape(node.value)))
    return "".join(parts)


def render_html(blocks: list[Block]) -> Markup:
    """Render parsed blocks; consecutive list items share one <ul>."""
    out: list[str] = []
    in_list = False
    for block in blocks:
        if isinstance(block, ListItem):
            if not in_list:
                out.append("<ul>")
                in_list = True
            out.append(f"<li>{_render_inline(block.children)}</li>")
            continue
        if in_list:
            out.append("</ul>")
            in_list = False
        if isinstance(block, Heading):
            out.append(f"<h{block.level}>{_render_inline(block.children)}</h{block.level}>")
        else:
            out.append(f"<p>{_render_inline(block.children)}</p>")
    if in_list:
        out.append("</ul>")
    return Markup("\n".join(out))


def to_html(text: str) -> Markup:
    return render_html(parse(text))
