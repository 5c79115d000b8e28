from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from gqlsite.domain.interfaces import (
    IAnchorChecker,
    IFileService,
    IMarkdownRenderer,
    IPageShell,
)
from gqlsite.domain.models import Page
from gqlsite.pages import all_pages
from gqlsite.services.config.app_config import AppConfig, build_app_config
from gqlsite.services.exporters.base import ExporterRegistryInst
from gqlsite.services.exporters.html_exporter import HtmlExporter
from gqlsite.services.exporters.pdf_exporter import PdfExporter
from gqlsite.services.file_service import FileService
from gqlsite.services.link_checker import AnchorChecker
from gqlsite.services.markdown_renderer import MarkdownRenderer
from gqlsite.services.page_shell import PageShell
from gqlsite.services.site_builder import SiteBuilder


class Container:
    """
    Lightweight DI container:
      - Wires default services from AppConfig if not provided
      - Registers built-in exporters (html, pdf) in its own registry
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        renderer: IMarkdownRenderer | None = None,
        shell: IPageShell | None = None,
        checker: IAnchorChecker | None = None,
        files: IFileService | None = None,
        pages: Sequence[Page] | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()

        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer(
            allow_raw_html=self.config.raw_html, highlight=self.config.highlight
        )
        self.shell: IPageShell = shell or PageShell(site_name=self.config.site_name)
        self.checker: IAnchorChecker = checker or AnchorChecker()
        self.file_service: IFileService = files or FileService()
        self.pages: list[Page] = list(pages) if pages is not None else list(all_pages())

        self.exporters = ExporterRegistryInst()
        self._ensure_builtin_exporters()

    # ---------- Class helpers ----------

    @staticmethod
    def default(*, config_path: Path | None = None, project_root: Path | None = None) -> Container:
        return Container(config=build_app_config(explicit_ini=config_path, project_root=project_root))

    # ---------- Internals ----------

    def _ensure_builtin_exporters(self) -> None:
        # html
        try:
            self.exporters.get("html")
        except KeyError:
            self.exporters.register(HtmlExporter(files=self.file_service))

        # pdf
        try:
            self.exporters.get("pdf")
        except KeyError:
            self.exporters.register(PdfExporter())

    # ---------- Factories ----------

    def build_site_builder(self) -> SiteBuilder:
        return SiteBuilder(
            pages=self.pages,
            renderer=self.renderer,
            shell=self.shell,
            checker=self.checker,
            exporters=self.exporters,
        )
