# gqlsite/services/markdown_renderer.py
from __future__ import annotations

import re
import xml.etree.ElementTree as etree

import markdown
from markdown.treeprocessors import Treeprocessor

from gqlsite.domain.interfaces import IMarkdownRenderer

# Attributes that carry a URL the browser may navigate to or load.
_URL_ATTRS = ("href", "src", "action", "formaction")
_UNSAFE_SCHEMES = ("javascript:", "vbscript:", "data:")
# Browsers ignore ASCII control chars and whitespace inside a scheme ("java\tscript:").
_IGNORED_IN_SCHEME = re.compile(r"[\x00-\x20]")


def _is_unsafe_url(value: str) -> bool:
    return _IGNORED_IN_SCHEME.sub("", value).lower().startswith(_UNSAFE_SCHEMES)


class SanitizeTreeprocessor(Treeprocessor):
    """Drop event-handler attributes and script-capable URLs from the rendered tree."""

    def run(self, root: etree.Element) -> None:
        for el in root.iter():
            for attr in list(el.attrib):
                if attr.lower().startswith("on"):
                    del el.attrib[attr]
            for attr in _URL_ATTRS:
                value = el.get(attr)
                if value is not None and _is_unsafe_url(value):
                    del el.attrib[attr]


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts page Markdown to an HTML fragment for embedding in the page shell.

    Headings get stable ids from the `toc` extension (`### C# / .NET` -> `id="c-net"`),
    so in-page table-of-contents links resolve. Fenced code is handled by
    pymdownx.superfences and highlighted with Pygments via pymdownx.highlight.

    Unless `allow_raw_html=True`, output is sanitized: raw HTML is escaped,
    `on*` attributes (e.g. from attr_list) are removed and javascript:/vbscript:/data:
    URLs are dropped from links and images.
    """

    def __init__(self, *, allow_raw_html: bool = False, highlight: bool = True) -> None:
        self.allow_raw_html = allow_raw_html
        self.highlight = highlight

    def to_html(self, markdown_text: str) -> str:
        md = self._build()
        return md.convert(markdown_text)

    # -------------------- helpers --------------------

    def _build(self) -> markdown.Markdown:
        # "extra" minus fenced_code; superfences owns fenced blocks
        exts = [
            "abbr",
            "attr_list",
            "def_list",
            "footnotes",
            "md_in_html",
            "tables",
            "pymdownx.highlight",
            "pymdownx.superfences",
            "toc",
            "sane_lists",
            "smarty",
        ]

        ext_cfg = {
            "pymdownx.highlight": {
                "use_pygments": self.highlight,
                "guess_lang": True,
                "noclasses": True,
            },
        }

        md = markdown.Markdown(
            extensions=exts,
            extension_configs=ext_cfg,
            output_format="html5",
        )

        if not self.allow_raw_html:
            # Without these, "<tag>" is treated as text and escaped on serialization.
            md.preprocessors.deregister("html_block", strict=False)
            md.inlinePatterns.deregister("html", strict=False)
            # Lower priority runs later: after inline (20), attr_list (8) and toc (5).
            md.treeprocessors.register(SanitizeTreeprocessor(md), "sanitize", 1)

        return md
