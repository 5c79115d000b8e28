from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from gqlsite.domain.models import LinkReport, Page


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to an HTML fragment (no page chrome)."""

    def to_html(self, markdown_text: str) -> str: ...


class IPageShell(Protocol):
    """Wrap rendered page content in the shared site layout."""

    def render(self, page: Page, body_html: str) -> str: ...


class IAnchorChecker(Protocol):
    """Verify in-page fragment links of a full HTML document."""

    def check(self, html: str) -> LinkReport: ...


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class IConfigService(Protocol):
    """Read-only access to sectioned string settings."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def get_list(self, section: str, key: str, default: list[str] | None = None) -> list[str]: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    def get_version(self) -> str: ...


class IExporter(ABC):
    """Export strategy interface. Implementations export HTML to a given format/path."""

    name: str  # e.g. "html", "pdf"
    label: str  # e.g. "Export HTML"
    file_ext: str  # e.g. "html"

    @abstractmethod
    def export(self, html: str, out_path: Path) -> None:
        """Perform export. 'html' contains a full HTML document string."""
        raise NotImplementedError


class IExporterRegistry(Protocol):
    def register(self, e: IExporter) -> None: ...
    def get(self, name: str) -> IExporter: ...
    def all(self) -> list[IExporter]: ...
