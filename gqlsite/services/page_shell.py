from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from html import escape

from gqlsite.domain.interfaces import IPageShell
from gqlsite.domain.models import NavItem, Page
from gqlsite.utils.constants import (
    CSS_SITE,
    FOOTER_TEMPLATE,
    HTML_TEMPLATE,
    NAV_ITEMS,
    SITE_NAME,
)


class PageShell(IPageShell):
    """
    Shared site layout: head, top navigation, content column and footer.

    The nav item whose section matches the page's section is marked `active`.
    `body_html` is embedded as-is; it is expected to come from the Markdown renderer.
    """

    def __init__(
        self,
        site_name: str = SITE_NAME,
        nav: Sequence[NavItem] = NAV_ITEMS,
        css: str = CSS_SITE,
        year: int | None = None,
    ) -> None:
        self.site_name = site_name
        self.nav = tuple(nav)
        self.css = css
        self.year = year or date.today().year

    def render(self, page: Page, body_html: str) -> str:
        if not page.section:
            raise ValueError(f"Page {page.title!r} has no section")

        return HTML_TEMPLATE.format(
            title=escape(f"{page.title} | {self.site_name}"),
            css=self.css,
            site_name=escape(self.site_name),
            nav=self._nav_html(page.section),
            heading=escape(page.title),
            body=body_html,
            footer=escape(FOOTER_TEMPLATE.format(year=self.year, site_name=self.site_name)),
        )

    def _nav_html(self, active_section: str) -> str:
        links = []
        for item in self.nav:
            cls = ' class="active"' if item.section == active_section else ""
            links.append(f'<a href="{escape(item.href)}"{cls}>{escape(item.label)}</a>')
        return "\n".join(links)
