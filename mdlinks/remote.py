"""Look up the hosting remote of the repository that contains the documents."""

from __future__ import annotations

import logging
import os
import re
import subprocess
from pathlib import Path
from typing import Callable

from .errors import RemoteLookupError

logger = logging.getLogger(__name__)

DEFAULT_REMOTE_NAME = "origin"
NOT_A_REPOSITORY_STATUS = 128
NO_SUCH_REMOTE_STATUS = 2

_SCP_RE = re.compile(r"^(?:[\w.-]+@)?(?P<host>[\w.-]+):(?P<path>[^/].*)$")
_URL_RE = re.compile(
    r"^(?P<scheme>[a-z][a-z0-9+.-]*)://(?:[^@/]+@)?(?P<rest>.+)$", re.IGNORECASE
)

Runner = Callable[..., subprocess.CompletedProcess]


def normalize_remote_url(url: str) -> str:
    """Convert a git remote URL into the browsable ``https://host/owner/repo`` form.

    ``git@github.com:org/repo.git`` and ``ssh://git@github.com/org/repo`` both
    become ``https://github.com/org/repo``. HTTP(S) URLs lose any credentials
    and the ``.git`` suffix.
    """

    value = url.strip().rstrip("/")
    if not value:
        return ""
    if value.endswith(".git"):
        value = value[: -len(".git")]

    match = _URL_RE.match(value)
    if match:
        scheme = match.group("scheme").lower()
        rest = match.group("rest")
        if scheme in {"ssh", "git", "git+ssh"}:
            host, _, path = rest.partition("/")
            host = host.split(":", 1)[0]
            return f"https://{host}/{path}".rstrip("/")
        return f"{scheme}://{rest}"

    match = _SCP_RE.match(value)
    if match:
        return f"https://{match.group('host')}/{match.group('path')}"
    return value


def get_remote_url(
    root: Path | str,
    remote_name: str = DEFAULT_REMOTE_NAME,
    runner: Runner = subprocess.run,
) -> str:
    """Return the normalized URL of ``remote_name`` for the repository at ``root``.

    Returns an empty string when git is not installed, ``root`` is not inside a
    git work tree, or the remote is not configured. Any other git failure
    raises :class:`RemoteLookupError`.
    """

    command = ["git", "-C", str(root), "remote", "get-url", remote_name]
    try:
        completed = runner(
            command,
            capture_output=True,
            text=True,
            check=False,
            env={**os.environ, "LC_ALL": "C"},
        )
    except FileNotFoundError:
        logger.warning("git executable not found; repo-absolute links are skipped")
        return ""

    if completed.returncode == 0:
        remote = normalize_remote_url(completed.stdout)
        logger.debug("Resolved remote %s -> %s", remote_name, remote)
        return remote

    stderr = (completed.stderr or "").strip()
    if completed.returncode == NOT_A_REPOSITORY_STATUS:
        logger.warning(
            "%s is not inside a git repository; repo-absolute links are skipped", root
        )
        return ""
    if completed.returncode == NO_SUCH_REMOTE_STATUS:
        logger.warning(
            "Remote %r is not configured; repo-absolute links are skipped", remote_name
        )
        return ""
    raise RemoteLookupError(
        f"git remote lookup failed with status {completed.returncode}: {stderr}"
    )


__all__ = ["DEFAULT_REMOTE_NAME", "get_remote_url", "normalize_remote_url"]
