"""Inline link extraction."""

from __future__ import annotations

import re
from typing import Iterator

from .models import LinkReference, MarkdownFile

LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)]*)\)")


def extract_links(text: str) -> list[tuple[str, str]]:
    """Return ``(description, target)`` pairs in order of appearance."""

    return [(match.group(1), match.group(2)) for match in LINK_RE.finditer(text)]


def iter_link_references(md_file: MarkdownFile) -> Iterator[LinkReference]:
    for description, target in extract_links(md_file.text):
        yield LinkReference(description=description, target=target, source=md_file)


__all__ = ["LINK_RE", "extract_links", "iter_link_references"]
