from __future__ import annotations

import os
from pathlib import Path

import pytest

# Qt-backed exporters run headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from gqlsite.di.container import Container  # noqa: E402
from gqlsite.services.config.app_config import build_app_config  # noqa: E402
from gqlsite.services.file_service import FileService  # noqa: E402
from gqlsite.services.link_checker import AnchorChecker  # noqa: E402
from gqlsite.services.markdown_renderer import MarkdownRenderer  # noqa: E402
from gqlsite.services.page_shell import PageShell  # noqa: E402


# --- QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Other common fixtures ---


@pytest.fixture(autouse=True)
def isolated_user_config(monkeypatch, tmp_path: Path) -> Path:
    """Point the platformdirs user config lookup at an empty temp dir."""
    user_dir = tmp_path / "usercfg"
    monkeypatch.setattr(
        "gqlsite.services.config.ini_config_service.user_config_dir",
        lambda appname: str(user_dir),
    )
    return user_dir


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture()
def container(project_root: Path) -> Container:
    return Container(config=build_app_config(project_root=project_root))


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture()
def shell() -> PageShell:
    return PageShell(year=2016)


@pytest.fixture()
def checker() -> AnchorChecker:
    return AnchorChecker()
