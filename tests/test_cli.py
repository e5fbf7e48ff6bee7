"""Tests for the ``mdsite`` command functions."""

from __future__ import annotations

import json
import typing as typ

import pytest
from flask import Flask

from mdsite import cli
from mdsite.errors import ConfigurationError, DocumentNotFound

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def config_path(tmp_path: Path, content_root: Path) -> Path:
    """Write a config.json pointing at the sample content tree."""
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "ContentFolder": content_root.name,
                "ArticlesPerPage": 2,
                "ReadMoreText": "More",
                "ServerIp": "127.0.0.1:8123",
            }
        ),
        encoding="utf-8",
    )
    return path


def test_menu_prints_links_and_titles(
    config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The menu command prints one tab-separated line per section."""
    cli.menu(config=config_path)
    assert capsys.readouterr().out.splitlines() == [
        "/\tHome",
        "/2-blog\tBlog",
        "/3-photo-gallery\tPhoto Gallery",
    ]


def test_render_listing_page(
    config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A numeric page renders a listing page."""
    cli.render("2-blog", "2", config=config_path)
    out = capsys.readouterr().out
    assert "First post" in out
    assert 'href="/2-blog/first-post">More</a>' in out


def test_render_document(config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """A slug renders the single document."""
    cli.render("2-blog", "second-post", config=config_path)
    assert "Second hidden." in capsys.readouterr().out


def test_render_missing_document(config_path: Path) -> None:
    """Errors propagate to the caller."""
    with pytest.raises(DocumentNotFound):
        cli.render("2-blog", "nothing-here", config=config_path)


def test_serve_uses_configured_bind_address(
    config_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """serve() loads the config once and binds to ServerIp."""
    calls: list[dict[str, typ.Any]] = []

    def _fake_run(self: Flask, **kwargs: typ.Any) -> None:
        calls.append(kwargs)

    monkeypatch.setattr(Flask, "run", _fake_run)
    cli.serve(config=config_path)
    assert calls == [{"host": "127.0.0.1", "port": 8123, "debug": False}]


def test_serve_bind_override(config_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """--bind takes precedence over ServerIp."""
    calls: list[dict[str, typ.Any]] = []
    monkeypatch.setattr(Flask, "run", lambda self, **kwargs: calls.append(kwargs))
    cli.serve(config=config_path, bind=":5000", debug=True)
    assert calls == [{"host": "0.0.0.0", "port": 5000, "debug": True}]


def test_serve_refuses_bad_config(tmp_path: Path) -> None:
    """A missing config file stops the server before it starts."""
    with pytest.raises(ConfigurationError):
        cli.serve(config=tmp_path / "missing.json")


@pytest.mark.parametrize("page", ["²", "١"])
def test_render_treats_non_ascii_digits_as_slug(config_path: Path, page: str) -> None:
    """Only ASCII digits select a listing page; anything else is a page name."""
    with pytest.raises(DocumentNotFound):
        cli.render("2-blog", page, config=config_path)
