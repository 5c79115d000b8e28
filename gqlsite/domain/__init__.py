"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import (
    IAnchorChecker,
    IExporter,
    IFileService,
    IMarkdownRenderer,
    IPageShell,
)
from .models import AnchorIssue, LinkReport, NavItem, Page

__all__ = [
    "IMarkdownRenderer",
    "IPageShell",
    "IAnchorChecker",
    "IFileService",
    "IExporter",
    "Page",
    "NavItem",
    "AnchorIssue",
    "LinkReport",
]
