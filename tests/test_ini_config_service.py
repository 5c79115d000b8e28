# tests/test_ini_config_service.py
from __future__ import annotations

from pathlib import Path

import pytest

from gqlsite.services.config.ini_config_service import IniConfigService


def write_ini(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


def _user_ini(user_dir: Path) -> Path:
    return user_dir / IniConfigService.DEFAULT_FILE


def test_defaults_when_no_config_files():
    cfg = IniConfigService()
    assert cfg.app_version() == "0.0.0"
    assert cfg.loaded_from is None

    # getters with defaults
    assert cfg.get("missing", "key", "x") == "x"
    assert cfg.get_int("app", "nonint", 42) == 42
    assert cfg.get_bool("app", "nope", False) is False
    assert cfg.get_list("build", "formats", ["html"]) == ["html"]
    assert isinstance(cfg.as_dict(), dict)


def test_project_root_config_is_used_when_present(tmp_path):
    proj_root = tmp_path / "repo"
    ini = proj_root / "config" / "config.ini"
    write_ini(ini, "[app]\nversion = 1.2.3\n[render]\nraw_html = true\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "1.2.3"
    assert cfg.get_bool("render", "raw_html", None) is True
    assert cfg.loaded_from == ini


def test_user_config_preferred_over_project_root(tmp_path, isolated_user_config):
    plat_path = _user_ini(isolated_user_config)
    proj_root = tmp_path / "repo"
    proj_path = proj_root / "config" / "config.ini"

    write_ini(plat_path, "[app]\nversion = 2.0.0\n")
    write_ini(proj_path, "[app]\nversion = 1.0.0\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "2.0.0"
    assert cfg.loaded_from == plat_path


def test_explicit_path_overrides_everything(tmp_path, isolated_user_config):
    plat_path = _user_ini(isolated_user_config)
    proj_root = tmp_path / "repo"
    proj_path = proj_root / "config" / "config.ini"
    explicit_path = tmp_path / "explicit.ini"

    write_ini(plat_path, "[app]\nversion = 2.0.0\n")
    write_ini(proj_path, "[app]\nversion = 1.0.0\n")
    write_ini(explicit_path, "[app]\nversion = 9.9.9\n")

    cfg = IniConfigService(explicit_path=explicit_path, project_root=proj_root)
    assert cfg.app_version() == "9.9.9"
    assert cfg.loaded_from == explicit_path


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("42", 42),
        ("  7  ", 7),
        ("notanint", None),
        ("", None),
    ],
)
def test_get_int_parsing(tmp_path, raw, expected):
    ini = tmp_path / "c.ini"
    write_ini(ini, f"[limits]\nmax = {raw}\n")

    cfg = IniConfigService(explicit_path=ini)
    assert cfg.get_int("limits", "max", None) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        (" True ", True),
        ("yes", True),
        ("on", True),
        ("false", False),
        ("no", False),
        ("off", False),
        ("0", False),
        ("maybe", None),
        ("", None),
    ],
)
def test_get_bool_parsing(tmp_path, raw, expected):
    ini = tmp_path / "c.ini"
    write_ini(ini, f"[build]\ncheck_anchors = {raw}\n")

    cfg = IniConfigService(explicit_path=ini)
    assert cfg.get_bool("build", "check_anchors", None) is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("html", ["html"]),
        ("html, pdf", ["html", "pdf"]),
        (" html ,, pdf ,", ["html", "pdf"]),
        ("", []),
    ],
)
def test_get_list_parsing(tmp_path, raw, expected):
    ini = tmp_path / "c.ini"
    write_ini(ini, f"[build]\nformats = {raw}\n")

    cfg = IniConfigService(explicit_path=ini)
    assert cfg.get_list("build", "formats", ["x"]) == expected


def test_as_dict_snapshot(tmp_path):
    ini = tmp_path / "c.ini"
    write_ini(ini, "[app]\nversion = 3.1.4\n\n[site]\nname = GraphQL\noutput_dir = public\n")

    snap = IniConfigService(explicit_path=ini).as_dict()
    assert snap.get("app", {}).get("version") == "3.1.4"
    assert snap.get("site", {}).get("name") == "GraphQL"
    assert snap.get("site", {}).get("output_dir") == "public"


def test_malformed_config_is_ignored_and_defaults_used(isolated_user_config, caplog):
    bad_path = _user_ini(isolated_user_config)
    write_ini(bad_path, "this is not INI at all")

    cfg = IniConfigService()
    # It should not crash, loaded_from stays None, and defaults applied
    assert cfg.loaded_from is None
    assert cfg.app_version() == "0.0.0"
    assert "Ignoring unreadable config" in caplog.text


def test_malformed_config_falls_through_to_next_candidate(tmp_path, isolated_user_config):
    write_ini(_user_ini(isolated_user_config), "garbage")
    proj_root = tmp_path / "repo"
    proj_path = proj_root / "config" / "config.ini"
    write_ini(proj_path, "[app]\nversion = 1.0.0\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.loaded_from == proj_path
    assert cfg.app_version() == "1.0.0"
