"""Locate and read the Markdown files of a documentation tree."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path
from typing import Iterable, Sequence

from .errors import DiscoveryError
from .models import MarkdownFile

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def _is_excluded(relative: str, patterns: Sequence[str]) -> bool:
    return any(fnmatch.fnmatch(relative, pattern) for pattern in patterns)


def _raise_listing_error(exc: OSError) -> None:
    raise DiscoveryError(f"Unable to list {exc.filename}: {exc.strerror}") from exc


def check_root(root: Path | str) -> Path:
    """Ensure ``root`` is an existing directory whose entries can be listed."""

    root = Path(root)
    try:
        if not root.exists():
            raise DiscoveryError(f"Document root does not exist: {root}")
        if not root.is_dir():
            raise DiscoveryError(f"Document root is not a directory: {root}")
        with os.scandir(root) as entries:
            next(entries, None)
    except OSError as exc:
        raise DiscoveryError(f"Document root is not readable: {root}: {exc}") from exc
    return root


def discover_markdown_files(
    root: Path | str, exclude: Iterable[str] = ()
) -> list[str]:
    """Return the sorted POSIX paths, relative to ``root``, of every ``*.md`` file.

    Parameters
    ----------
    root
        Directory searched recursively.
    exclude
        Glob patterns matched against the relative path; matching files are
        skipped.

    Any directory that cannot be listed raises :class:`DiscoveryError`.
    """

    root = check_root(root)
    patterns = tuple(exclude)
    found: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_listing_error):
        dirnames.sort()
        for name in filenames:
            if not name.endswith(MARKDOWN_SUFFIX):
                continue
            path = Path(dirpath) / name
            if not path.is_file():
                continue
            relative = path.relative_to(root).as_posix()
            if patterns and _is_excluded(relative, patterns):
                logger.debug("Skipping excluded file %s", relative)
                continue
            found.append(relative)

    found.sort()
    logger.debug("Discovered %d markdown files under %s", len(found), root)
    return found


def load_markdown_files(root: Path | str, paths: Iterable[str]) -> list[MarkdownFile]:
    """Read ``paths`` (relative to ``root``) into :class:`MarkdownFile` records."""

    root = Path(root)
    files: list[MarkdownFile] = []
    for relative in paths:
        try:
            text = (root / relative).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise DiscoveryError(f"Unable to read {relative}: {exc}") from exc
        files.append(MarkdownFile(path=relative, text=text))
    return files


__all__ = [
    "MARKDOWN_SUFFIX",
    "check_root",
    "discover_markdown_files",
    "load_markdown_files",
]
