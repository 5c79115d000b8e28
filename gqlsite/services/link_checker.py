from __future__ import annotations

import logging
from collections import Counter

from bs4 import BeautifulSoup

from gqlsite.domain.interfaces import IAnchorChecker
from gqlsite.domain.models import AnchorIssue, LinkReport

logger = logging.getLogger(__name__)

# Fragments browsers resolve without a matching element.
_ALWAYS_VALID = {"", "top"}


class AnchorChecker(IAnchorChecker):
    """
    Content-integrity check for a rendered page.

    Every `href="#x"` must point at an element with `id="x"` (or a legacy
    `<a name="x">`) in the same document, and no id may appear twice.
    Site-relative links (`/graphql-js/`) are collected but not resolved.
    """

    def check(self, html: str) -> LinkReport:
        soup = BeautifulSoup(html, "html.parser")
        report = LinkReport()

        id_counts = Counter(tag["id"] for tag in soup.find_all(id=True))
        report.ids = set(id_counts)
        report.ids.update(a["name"] for a in soup.find_all("a", attrs={"name": True}))

        for dup, n in sorted(id_counts.items()):
            if n > 1:
                report.issues.append(AnchorIssue(href=f"#{dup}", text="", reason="duplicate-id"))

        for a in soup.find_all("a", href=True):
            href = a["href"]
            if href.startswith("#"):
                report.fragment_links.append(href)
                target = href[1:]
                if target not in _ALWAYS_VALID and target not in report.ids:
                    report.issues.append(
                        AnchorIssue(href=href, text=a.get_text(strip=True), reason="missing-target")
                    )
            elif href.startswith("/") and not href.startswith("//"):
                report.site_links.append(href)

        for issue in report.issues:
            logger.warning("Anchor issue %s: %s (%s)", issue.href, issue.reason, issue.text)

        return report
