"""Rewrite raw link targets into a canonical, classified form."""

from __future__ import annotations

from typing import Sequence

from .models import DEFAULT_BRANCHES, NormalizedTarget, TargetKind


def classify(value: str) -> TargetKind:
    """Classify a normalized target.

    External URLs win over section anchors, which win over relative paths.
    """

    if value.startswith("http") and "://" in value:
        return "external"
    if value.startswith("#"):
        return "section"
    return "relative"


def _parent_prefix(directory: str) -> str:
    segments = [segment for segment in directory.split("/") if segment]
    return "/".join(".." for _ in segments)


def rewrite_repo_absolute(
    raw: str,
    source_path: str,
    remote: str,
    branches: Sequence[str] = DEFAULT_BRANCHES,
) -> str | None:
    """Translate ``<remote>/blob/<branch>/path`` into a path relative to the source.

    Returns ``None`` when ``raw`` does not point into the remote, or when no
    remote is known. Any ``#fragment`` is dropped from the rewritten path.
    """

    remote = remote.rstrip("/")
    if not remote:
        return None
    for branch in branches:
        prefix = f"{remote}/blob/{branch}/"
        if not raw.startswith(prefix):
            continue
        stripped = raw[len(prefix) :]
        directory, _, _ = source_path.rpartition("/")
        parents = _parent_prefix(directory)
        joined = f"{parents}/{stripped}" if parents else stripped
        return joined.split("#", 1)[0]
    return None


def normalize_target(
    raw: str,
    source_path: str,
    remote: str = "",
    branches: Sequence[str] = DEFAULT_BRANCHES,
) -> NormalizedTarget:
    """Return the :class:`NormalizedTarget` for ``raw`` found in ``source_path``."""

    value = raw
    if not raw.startswith("#"):
        rewritten = rewrite_repo_absolute(raw, source_path, remote, branches)
        if rewritten is not None:
            value = rewritten
    return NormalizedTarget(kind=classify(value), value=value)


__all__ = ["classify", "normalize_target", "rewrite_repo_absolute"]
