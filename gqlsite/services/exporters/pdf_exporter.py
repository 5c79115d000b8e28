from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QMarginsF
from PyQt6.QtGui import QPageLayout, QPageSize, QTextDocument
from PyQt6.QtPrintSupport import QPrinter

from gqlsite.domain.interfaces import IExporter


class PdfExporter(IExporter):
    """Print the page HTML to an A4 PDF. Requires a running QApplication."""

    name = "pdf"
    label = "Export PDF"
    file_ext = "pdf"

    def __init__(self, margins_mm: tuple[float, float, float, float] = (12.7, 12.7, 12.7, 12.7)) -> None:
        self._margins = QMarginsF(*margins_mm)

    def export(self, html: str, out_path: Path) -> None:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        printer = QPrinter(QPrinter.PrinterMode.HighResolution)
        printer.setOutputFormat(QPrinter.OutputFormat.PdfFormat)
        printer.setOutputFileName(str(out_path))
        layout = QPageLayout(
            QPageSize(QPageSize.PageSizeId.A4),
            QPageLayout.Orientation.Portrait,
            self._margins,
            QPageLayout.Unit.Millimeter,
        )
        printer.setPageLayout(layout)

        doc = QTextDocument()
        doc.setHtml(html)
        doc.print(printer)
