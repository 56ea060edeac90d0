"""Heading slugs and HTML named anchors used to resolve section links."""

from __future__ import annotations

import re

HEADING_RE = re.compile(r"#+\s")
HTML_ANCHOR_RE = re.compile(
    r"<a\s(?:[^>]*?\s)?name=\"([^\"]*)\"[^>]*>.*?</a>", re.IGNORECASE | re.DOTALL
)
_SLUG_DROP_RE = re.compile(r"[^\w\s-]|_")
_WHITESPACE_RE = re.compile(r"\s+")


def heading_slug(line: str) -> str:
    """Derive the anchor slug of a heading line.

    Keeps letters, digits, hyphens and whitespace, then lower-cases and joins
    words with single hyphens. ``"## Getting Started"`` becomes
    ``"getting-started"``. Repeated headings are not numbered.
    """

    kept = _SLUG_DROP_RE.sub("", line).strip().lower()
    return _WHITESPACE_RE.sub("-", kept)


def heading_slugs(text: str) -> list[str]:
    return [heading_slug(line) for line in text.splitlines() if HEADING_RE.match(line)]


def html_anchor_names(text: str) -> list[str]:
    """Return the ``name`` values of ``<a name="...">...</a>`` tags."""

    return [match.group(1) for match in HTML_ANCHOR_RE.finditer(text)]


def has_section(text: str, anchor: str) -> bool:
    """Return whether ``anchor`` (with or without ``#``) is defined in ``text``."""

    wanted = anchor[1:] if anchor.startswith("#") else anchor
    wanted = wanted.lower()
    if wanted in heading_slugs(text):
        return True
    return any(name.lower() == wanted for name in html_anchor_names(text))


__all__ = ["has_section", "heading_slug", "heading_slugs", "html_anchor_names"]
