"""Render validation results for the console."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from .models import Failure


def format_report(failures: Sequence[Failure]) -> str:
    """Return the text report, or an empty string when nothing is broken."""

    if not failures:
        return ""
    lines = [f"Found {len(failures)} broken links:"]
    lines.extend(f"- {failure.message}" for failure in failures)
    return "\n".join(lines)


def build_payload(
    root: Path | str, files: int, failures: Sequence[Failure]
) -> dict[str, Any]:
    return {
        "root": str(root),
        "files": files,
        "broken": len(failures),
        "failures": [failure.model_dump() for failure in failures],
    }


def format_json(root: Path | str, files: int, failures: Sequence[Failure]) -> str:
    payload = build_payload(root, files, failures)
    return json.dumps(payload, indent=2, ensure_ascii=False)


__all__ = ["build_payload", "format_json", "format_report"]
