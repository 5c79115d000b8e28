"""Pages built into the site, keyed by their nav section."""

from __future__ import annotations

from collections.abc import Sequence

from gqlsite.domain.models import Page

from .code import CODE_MARKDOWN, CODE_PAGE

_PAGES: tuple[Page, ...] = (CODE_PAGE,)


def all_pages() -> Sequence[Page]:
    return _PAGES


def get_page(section: str) -> Page:
    for page in _PAGES:
        if page.section == section:
            return page
    raise KeyError(section)


__all__ = ["CODE_MARKDOWN", "CODE_PAGE", "all_pages", "get_page"]
