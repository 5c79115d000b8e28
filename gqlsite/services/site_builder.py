from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from gqlsite.domain.interfaces import (
    IAnchorChecker,
    IExporterRegistry,
    IMarkdownRenderer,
    IPageShell,
)
from gqlsite.domain.models import BuildResult, LinkReport, Page, RenderedPage

logger = logging.getLogger(__name__)


class BrokenAnchorsError(RuntimeError):
    """Raised before writing anything when a page links to an anchor it does not define."""

    def __init__(self, reports: Mapping[str, LinkReport]) -> None:
        self.reports = dict(reports)
        bad = ", ".join(
            f"{section}: {issue.href} ({issue.reason})"
            for section, report in self.reports.items()
            for issue in report.issues
        )
        super().__init__(f"Broken in-page anchors: {bad}")


class SiteBuilder:
    """
    Markdown -> renderer -> page shell -> anchor check -> exporters.

    Pages are rendered and checked first; files are only written once every
    page passes (or checking is disabled).
    """

    def __init__(
        self,
        *,
        pages: Sequence[Page],
        renderer: IMarkdownRenderer,
        shell: IPageShell,
        checker: IAnchorChecker,
        exporters: IExporterRegistry,
    ) -> None:
        self.pages = list(pages)
        self.renderer = renderer
        self.shell = shell
        self.checker = checker
        self.exporters = exporters

    def render_page(self, page: Page) -> RenderedPage:
        body = self.renderer.to_html(page.markdown)
        html = self.shell.render(page, body)
        report = self.checker.check(html)
        logger.debug(
            "Rendered %s: %d ids, %d fragment links, %d issues",
            page.permalink,
            len(report.ids),
            len(report.fragment_links),
            len(report.issues),
        )
        return RenderedPage(page=page, html=html, report=report)

    def render_all(self) -> list[RenderedPage]:
        return [self.render_page(p) for p in self.pages]

    def build(
        self,
        out_dir: Path,
        formats: Sequence[str] = ("html",),
        *,
        check_anchors: bool = True,
    ) -> BuildResult:
        exporters = [self.exporters.get(name) for name in formats]
        rendered = self.render_all()
        result = BuildResult(reports={r.page.section: r.report for r in rendered})

        if check_anchors and not result.ok:
            raise BrokenAnchorsError({k: v for k, v in result.reports.items() if not v.ok})

        for r in rendered:
            for exporter in exporters:
                out_path = r.page.output_path(out_dir, exporter.file_ext)
                exporter.export(r.html, out_path)
                result.written.append(out_path)
                logger.info("Wrote %s", out_path)

        return result
