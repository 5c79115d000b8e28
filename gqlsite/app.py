"""Command line interface: build and check the static site."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import typer
from rich.console import Console
from rich.table import Table

from gqlsite.di.container import Container
from gqlsite.services.site_builder import BrokenAnchorsError
from gqlsite.utils.constants import APP_NAME

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

app = typer.Typer(no_args_is_help=True, help=f"{APP_NAME}: render pages into the site layout.")

_console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _ensure_qapp() -> QApplication:
    """PDF export prints through Qt, which needs an application object.

    The caller must hold the returned reference while exporting; PyQt destroys
    an unreferenced QApplication immediately.
    """
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PyQt6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([APP_NAME])


@app.command()
def build(
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output directory."),
    formats: Optional[list[str]] = typer.Option(
        None, "--format", "-f", help="Export format (html, pdf). Repeatable."
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Explicit config.ini."),
    anchors: Optional[bool] = typer.Option(
        None, "--check/--no-check", help="Fail on broken in-page anchors."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render every page and write it under the output directory."""

    _configure_logging(verbose)
    container = Container.default(config_path=config)
    cfg = container.config

    out_dir = out or cfg.output_dir
    fmts = formats or cfg.formats
    check_anchors = cfg.check_anchors if anchors is None else anchors

    qapp = _ensure_qapp() if "pdf" in fmts else None

    try:
        result = container.build_site_builder().build(out_dir, fmts, check_anchors=check_anchors)
    except BrokenAnchorsError as e:
        _console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    except KeyError as e:
        available = ", ".join(container.exporters.names())
        _console.print(f"[red]Unknown export format: {e.args[0]} (available: {available})[/red]")
        raise typer.Exit(code=1)
    except OSError as e:
        _console.print(f"[red]Write failed: {e}[/red]")
        raise typer.Exit(code=1)

    for path in result.written:
        _console.print(f"[green]wrote[/green] {path}")
    del qapp


@app.command()
def check(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Explicit config.ini."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render every page and report its in-page anchors."""

    _configure_logging(verbose)
    container = Container.default(config_path=config)
    rendered = container.build_site_builder().render_all()

    table = Table(title="Anchor check")
    table.add_column("Page", style="bright_green", no_wrap=True)
    table.add_column("Ids", justify="right")
    table.add_column("Fragment links", justify="right")
    table.add_column("Status")
    table.add_column("Details", style="dim")

    failed = False
    for r in rendered:
        report = r.report
        details = "; ".join(f"{i.href} ({i.reason})" for i in report.issues)
        table.add_row(
            r.page.permalink,
            str(len(report.ids)),
            str(len(report.fragment_links)),
            "OK" if report.ok else "FAIL",
            details,
        )
        failed = failed or not report.ok

    _console.print(table)
    if failed:
        raise typer.Exit(code=1)


@app.command()
def version(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Explicit config.ini."),
) -> None:
    """Print the resolved version and where config was loaded from."""

    cfg = Container.default(config_path=config).config
    _console.print(cfg.get_version())
    if cfg.loaded_from is not None:
        _console.print(f"config: {cfg.loaded_from}", style="dim")
