"""Pydantic data models shared by the link validation pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

TargetKind = Literal["external", "section", "relative"]
FailureKind = Literal["relative", "section"]

DEFAULT_BRANCHES: tuple[str, ...] = ("main", "master")


class DocumentSet(BaseModel):
    """Root directory of a documentation tree and its hosting remote.

    Parameters
    ----------
    root
        Directory that holds the Markdown files.
    remote
        Base URL of the repository (e.g. ``https://github.com/org/repo``).
        An empty string disables rewriting of repo-absolute links.
    branches
        Branch names tried, in order, when matching ``<remote>/blob/<branch>/``.
    """

    root: Path
    remote: str = ""
    branches: tuple[str, ...] = DEFAULT_BRANCHES

    model_config = ConfigDict(frozen=True)

    @field_validator("remote", mode="before")
    @classmethod
    def _clean_remote(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip().rstrip("/")

    @field_validator("branches", mode="before")
    @classmethod
    def _clean_branches(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return DEFAULT_BRANCHES
        branches = tuple(str(item).strip() for item in value if str(item).strip())
        return branches or DEFAULT_BRANCHES


class MarkdownFile(BaseModel):
    """A Markdown document addressed relative to the document root."""

    path: str
    text: str = Field(repr=False)

    model_config = ConfigDict(frozen=True)

    @property
    def directory(self) -> str:
        """Return the containing directory, ``""`` for files at the root."""

        head, _, _ = self.path.rpartition("/")
        return head


class LinkReference(BaseModel):
    """One ``[description](target)`` occurrence inside a file."""

    description: str
    target: str
    source: MarkdownFile

    model_config = ConfigDict(frozen=True)


class NormalizedTarget(BaseModel):
    """Canonical form of a link target tagged with its classification."""

    kind: TargetKind
    value: str

    model_config = ConfigDict(frozen=True)


class Failure(BaseModel):
    """A link that did not resolve."""

    message: str
    kind: FailureKind
    source: str
    description: str
    target: str

    model_config = ConfigDict(frozen=True)


__all__ = [
    "DEFAULT_BRANCHES",
    "DocumentSet",
    "Failure",
    "FailureKind",
    "LinkReference",
    "MarkdownFile",
    "NormalizedTarget",
    "TargetKind",
]
