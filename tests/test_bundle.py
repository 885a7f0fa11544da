"""Tests for embedding locale files ahead of deployment."""

import runpy
from pathlib import Path

import pytest

from locale_table.bundle import (
    EMPTY_BUNDLE,
    collect_bundle,
    find_workspace_root,
    main,
    render_bundle_module,
    resolve_locales_path,
    write_bundle,
)
from locale_table.loader import load_data
from locale_table.sources import StaticSourceProvider


def _locales(tmp_path):
    locales = tmp_path / "locales"
    (locales / "sub").mkdir(parents=True)
    (locales / "en.yml").write_text("welcome: 'Welcome \"friend\"'\n", encoding="utf-8")
    (locales / "app.json").write_text('{"_version": 2, "bye": {"en": "Bye", "de": "Tschüss"}}', encoding="utf-8")
    (locales / "README.md").write_text("not a locale", encoding="utf-8")
    (locales / "sub" / "fr.yml").write_text("welcome: Bienvenue\n", encoding="utf-8")
    return locales


def test_collect_bundle_top_level_sorted(tmp_path):
    entries = collect_bundle(_locales(tmp_path))
    assert [(locale, ext) for locale, ext, _ in entries] == [("app", "json"), ("en", "yml")]


def test_collect_bundle_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        collect_bundle(tmp_path / "missing")


def test_empty_bundle_module():
    assert render_bundle_module([]) == EMPTY_BUNDLE


def test_written_bundle_round_trips_through_loader(tmp_path):
    dest = write_bundle(_locales(tmp_path), tmp_path / "bundled.py")
    namespace = runpy.run_path(str(dest))
    table = load_data(StaticSourceProvider(namespace["BUNDLED_DATA"]))
    assert table == {
        "en": {"welcome": 'Welcome "friend"', "bye": "Bye"},
        "de": {"bye": "Tschüss"},
    }


def test_find_workspace_root(tmp_path):
    _locales(tmp_path)
    start = tmp_path / "build" / "out"
    start.mkdir(parents=True)
    assert find_workspace_root(start) == tmp_path.resolve()
    assert find_workspace_root(start, marker="no-such-dir") is None


def test_cli(tmp_path, capsys):
    dest = tmp_path / "bundled.py"
    assert main([str(dest), "--locales", str(_locales(tmp_path))]) == 0
    assert dest.exists()
    assert main([str(dest), "--locales", str(tmp_path / "missing")]) == 1
    assert "does not exist" in capsys.readouterr().err


def test_cli_finds_locales_above_working_directory(tmp_path, monkeypatch):
    _locales(tmp_path)
    work = tmp_path / "app" / "src"
    work.mkdir(parents=True)
    monkeypatch.chdir(work)
    dest = tmp_path / "bundled.py"
    assert main([str(dest)]) == 0
    namespace = runpy.run_path(str(dest))
    assert [(locale, ext) for locale, ext, _ in namespace["BUNDLED_DATA"]] == [("app", "json"), ("en", "yml")]


def test_resolve_locales_path(tmp_path):
    _locales(tmp_path)
    assert resolve_locales_path("given") == Path("given")
    assert resolve_locales_path(None, tmp_path / "locales" / "sub") == tmp_path.resolve() / "locales"


def test_write_bundle_without_locales_is_empty(tmp_path):
    dest = write_bundle(None, tmp_path / "bundled.py")
    assert runpy.run_path(str(dest))["BUNDLED_DATA"] == []
