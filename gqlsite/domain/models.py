from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Page:
    """A static site page: markdown authored at build time plus its place in the site."""

    section: str
    title: str
    markdown: str
    permalink: str = "/"

    def output_path(self, root: Path, ext: str = "html") -> Path:
        """`/code/` -> `<root>/code/index.<ext>`; `/` -> `<root>/index.<ext>`."""
        parts = [p for p in self.permalink.strip("/").split("/") if p]
        return root.joinpath(*parts, f"index.{ext}")


@dataclass(frozen=True)
class NavItem:
    section: str
    label: str
    href: str


@dataclass(frozen=True)
class AnchorIssue:
    href: str
    text: str
    reason: str  # "missing-target" | "duplicate-id"


@dataclass
class LinkReport:
    ids: set[str] = field(default_factory=set)
    fragment_links: list[str] = field(default_factory=list)
    site_links: list[str] = field(default_factory=list)
    issues: list[AnchorIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


@dataclass(frozen=True)
class RenderedPage:
    page: Page
    html: str
    report: LinkReport


@dataclass
class BuildResult:
    written: list[Path] = field(default_factory=list)
    reports: dict[str, LinkReport] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.reports.values())
