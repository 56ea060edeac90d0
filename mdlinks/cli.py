"""Command line interface for the Markdown link checker."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable

from .config import CONFIG_FILENAME, CheckerConfig, apply_overrides, load_config
from .discovery import check_root
from .errors import MdlinksError
from .models import DocumentSet
from .remote import get_remote_url, normalize_remote_url
from .report import format_json, format_report
from .resolver import check_document_set

EXIT_OK = 0
EXIT_BROKEN = 1
EXIT_ERROR = 2


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_settings(args: argparse.Namespace) -> CheckerConfig:
    if args.config is not None:
        config = load_config(args.config, required=True)
    else:
        config = load_config(args.root / CONFIG_FILENAME)
    return apply_overrides(
        config,
        remote=args.remote,
        branches=args.branch,
        exclude=args.exclude,
        jobs=args.jobs,
    )


def _resolve_remote(args: argparse.Namespace, config: CheckerConfig) -> str:
    if args.no_remote:
        return ""
    if config.remote is not None:
        return normalize_remote_url(config.remote)
    return get_remote_url(args.root, config.remote_name)


def run(args: argparse.Namespace) -> int:
    """Execute a validation run and print the report; return the exit code."""

    check_root(args.root)
    config = _load_settings(args)
    document_set = DocumentSet(
        root=args.root,
        remote=_resolve_remote(args, config),
        branches=tuple(config.branches),
    )
    files, failures = check_document_set(
        document_set, config.exclude, jobs=config.jobs
    )

    if args.format == "json":
        print(format_json(document_set.root, len(files), failures))
    elif failures:
        print(format_report(failures))
    return EXIT_BROKEN if failures else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdlinks",
        description="Check relative and section links in a tree of Markdown files.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Directory to scan recursively (default: current directory).",
    )
    remote_group = parser.add_mutually_exclusive_group()
    remote_group.add_argument(
        "--remote",
        help="Repository URL used to recognise repo-absolute links; skips git.",
    )
    remote_group.add_argument(
        "--no-remote",
        action="store_true",
        help="Do not rewrite repo-absolute links.",
    )
    parser.add_argument(
        "--branch",
        action="append",
        help="Branch name accepted in <remote>/blob/<branch>/ links (repeatable).",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        metavar="GLOB",
        help="Skip files whose relative path matches GLOB (repeatable).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=f"YAML configuration file (default: <root>/{CONFIG_FILENAME}).",
    )
    parser.add_argument("--jobs", type=int, help="Number of worker threads.")
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Report format.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    _configure_logging(args.verbose)
    try:
        return run(args)
    except MdlinksError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main(sys.argv[1:]))
