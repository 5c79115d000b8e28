from __future__ import annotations
from pathlib import Path
from gqlsite.domain.interfaces import IExporter, IFileService


class HtmlExporter(IExporter):
    name = "html"
    label = "Export HTML"
    file_ext = "html"

    def __init__(self, files: IFileService | None = None) -> None:
        self._files = files

    def export(self, html: str, out_path: Path) -> None:
        if self._files is not None:
            self._files.write_text_atomic(out_path, html)
            return
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(html, encoding="utf-8")
