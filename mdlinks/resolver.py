"""Validate extracted links against the filesystem and the file's own sections."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Sequence

from .anchors import has_section
from .discovery import discover_markdown_files, load_markdown_files
from .extract import iter_link_references
from .models import DocumentSet, Failure, FailureKind, LinkReference, MarkdownFile
from .normalize import normalize_target

logger = logging.getLogger(__name__)

_LABELS: dict[FailureKind, str] = {
    "relative": "Broken relative link",
    "section": "Broken section link",
}


def _failure(kind: FailureKind, ref: LinkReference) -> Failure:
    message = (
        f"{_LABELS[kind]}: [{ref.description}]({ref.target}) "
        f"in file: {ref.source.path}"
    )
    return Failure(
        message=message,
        kind=kind,
        source=ref.source.path,
        description=ref.description,
        target=ref.target,
    )


def resolve_relative(root: Path, md_file: MarkdownFile, value: str) -> Path:
    """Return the filesystem path a relative link points to.

    The ``#fragment`` is ignored. Every path, including one written with a
    leading ``/``, is taken from the file's directory.
    """

    clean = value.split("#", 1)[0].lstrip("/")
    return (root / md_file.directory / clean).resolve()


def relative_exists(root: Path, md_file: MarkdownFile, value: str) -> bool:
    return resolve_relative(root, md_file, value).exists()


def validate_link(ref: LinkReference, document_set: DocumentSet) -> Failure | None:
    """Return a :class:`Failure` when ``ref`` is broken, ``None`` otherwise."""

    normalized = normalize_target(
        ref.target, ref.source.path, document_set.remote, document_set.branches
    )
    if normalized.kind == "external":
        logger.debug("Skipping external link %s", ref.target)
        return None
    if normalized.kind == "section":
        if has_section(ref.source.text, normalized.value):
            return None
        return _failure("section", ref)
    if relative_exists(Path(document_set.root), ref.source, normalized.value):
        return None
    return _failure("relative", ref)


def validate_file(md_file: MarkdownFile, document_set: DocumentSet) -> list[Failure]:
    failures: list[Failure] = []
    for ref in iter_link_references(md_file):
        failure = validate_link(ref, document_set)
        if failure is not None:
            logger.debug("%s", failure.message)
            failures.append(failure)
    return failures


def validate_files(
    files: Sequence[MarkdownFile], document_set: DocumentSet, jobs: int = 1
) -> list[Failure]:
    """Validate ``files`` and return failures in file order, then link order."""

    ordered = sorted(files, key=lambda item: item.path)
    if jobs > 1 and len(ordered) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            per_file = list(
                executor.map(lambda item: validate_file(item, document_set), ordered)
            )
    else:
        per_file = [validate_file(item, document_set) for item in ordered]

    failures: list[Failure] = []
    for chunk in per_file:
        failures.extend(chunk)
    return failures


def check_document_set(
    document_set: DocumentSet,
    exclude: Iterable[str] = (),
    jobs: int = 1,
) -> tuple[list[MarkdownFile], list[Failure]]:
    """Discover, read and validate every Markdown file under the root.

    Returns the files that were checked together with the failures found.
    """

    paths = discover_markdown_files(document_set.root, exclude)
    files = load_markdown_files(document_set.root, paths)
    logger.debug(
        "Checking %d files under %s (remote=%r)",
        len(files),
        document_set.root,
        document_set.remote,
    )
    return files, validate_files(files, document_set, jobs=jobs)


def validate_document_set(
    document_set: DocumentSet,
    exclude: Iterable[str] = (),
    jobs: int = 1,
) -> list[Failure]:
    _, failures = check_document_set(document_set, exclude, jobs=jobs)
    return failures


__all__ = [
    "check_document_set",
    "relative_exists",
    "resolve_relative",
    "validate_document_set",
    "validate_file",
    "validate_files",
    "validate_link",
]
