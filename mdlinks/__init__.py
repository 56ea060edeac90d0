"""Markdown link checker package initialization."""

from .anchors import has_section, heading_slug, html_anchor_names
from .config import CheckerConfig, load_config
from .discovery import discover_markdown_files, load_markdown_files
from .errors import ConfigError, DiscoveryError, MdlinksError, RemoteLookupError
from .extract import extract_links
from .models import DocumentSet, Failure, LinkReference, MarkdownFile, NormalizedTarget
from .normalize import classify, normalize_target
from .remote import get_remote_url, normalize_remote_url
from .report import format_report
from .resolver import validate_document_set, validate_file, validate_link

__version__ = "1.0.0"

__all__ = [
    "CheckerConfig",
    "ConfigError",
    "DiscoveryError",
    "DocumentSet",
    "Failure",
    "LinkReference",
    "MarkdownFile",
    "MdlinksError",
    "NormalizedTarget",
    "RemoteLookupError",
    "classify",
    "discover_markdown_files",
    "extract_links",
    "format_report",
    "get_remote_url",
    "has_section",
    "heading_slug",
    "html_anchor_names",
    "load_config",
    "load_markdown_files",
    "normalize_remote_url",
    "normalize_target",
    "validate_document_set",
    "validate_file",
    "validate_link",
]
