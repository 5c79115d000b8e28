"""Concrete service implementations and export strategies."""

from .file_service import FileService
from .link_checker import AnchorChecker
from .markdown_renderer import MarkdownRenderer
from .page_shell import PageShell
from .site_builder import BrokenAnchorsError, SiteBuilder

__all__ = [
    "FileService",
    "AnchorChecker",
    "MarkdownRenderer",
    "PageShell",
    "SiteBuilder",
    "BrokenAnchorsError",
]
