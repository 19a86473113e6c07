"""Tests for the dimcontent command line: slug, resolve, routes and config."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from dimcontent.cli.app import app

runner = CliRunner()


@pytest.fixture
def resolve_args(contents_file, templates_dir) -> list[str]:
    return [
        "resolve",
        str(contents_file),
        "--templates-dir",
        str(templates_dir),
        "--database",
        "sqlite://",
    ]


class TestSlug:
    def test_english(self):
        result = runner.invoke(app, ["slug", "Hello & World"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "hello-and-world"

    def test_locale_replacers(self):
        result = runner.invoke(app, ["slug", "Hallo & Welt", "--locale", "de"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "hallo-und-welt"


class TestResolve:
    def test_resolves_page_as_json(self, resolve_args):
        result = runner.invoke(app, [*resolve_args, "--id", "home"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["resource"] == {"resource_key": "pages", "id": "home"}
        assert data["content"]["title"] == "Home"
        assert data["content"]["pages"][0]["title"] == "About us"
        assert data["extension"]["seo"]["title"] == "Home | Example"

    def test_snippet(self, resolve_args):
        result = runner.invoke(app, [*resolve_args, "--id", "contact", "--resource-key", "snippets"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["content"]["description"] == "Write us"

    def test_properties(self, resolve_args):
        result = runner.invoke(
            app, [*resolve_args, "--id", "home", "-p", "title=title", "-p", "id=object.id"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["title"] == "Home"
        assert data["id"] == "home"

    def test_invalid_property(self, resolve_args):
        result = runner.invoke(app, [*resolve_args, "--id", "home", "-p", "title"])
        assert result.exit_code == 2

    def test_unknown_id(self, resolve_args):
        result = runner.invoke(app, [*resolve_args, "--id", "nope"])
        assert result.exit_code == 1
        assert "nope" in result.output

    def test_unknown_resource_key(self, resolve_args):
        result = runner.invoke(app, [*resolve_args, "--id", "home", "--resource-key", "articles"])
        assert result.exit_code == 1

    def test_cache_tags(self, resolve_args):
        result = runner.invoke(app, [*resolve_args, "--id", "home", "--tags"])
        assert result.exit_code == 0, result.output
        assert "pages-about" in result.output
        assert "snippets-contact" in result.output

    def test_invalid_content_file(self, tmp_path, templates_dir):
        content_file = tmp_path / "broken.yaml"
        content_file.write_text("pages: [\n", encoding="utf-8")
        result = runner.invoke(
            app,
            ["resolve", str(content_file), "--id", "1", "--templates-dir", str(templates_dir), "-d", "sqlite://"],
        )
        assert result.exit_code == 1


class TestRoutes:
    def test_list_empty_store(self):
        result = runner.invoke(app, ["routes", "list", "--database", "sqlite://"])
        assert result.exit_code == 0
        assert "Routes (0)" in result.stdout

    def test_list_json(self):
        result = runner.invoke(app, ["routes", "list", "--database", "sqlite://", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == []

    def test_unreachable_database_is_a_routing_error(self, tmp_path):
        database = f"sqlite:///{tmp_path / 'missing' / 'routes.db'}"
        result = runner.invoke(app, ["routes", "list", "--database", database])
        assert result.exit_code == 1
        assert "(ROUTING)" in result.output

    def test_locator(self):
        result = runner.invoke(app, ["routes", "locator", "Hello World", "--database", "sqlite://"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "/hello-world"


class TestConfig:
    def test_env_format(self, monkeypatch):
        monkeypatch.setenv("DIMCONTENT_MAX_DEPTH", "5")
        result = runner.invoke(app, ["config", "show", "--format", "env"])
        assert result.exit_code == 0
        assert "DIMCONTENT_MAX_DEPTH=5" in result.stdout

    def test_json_format(self):
        result = runner.invoke(app, ["config", "show", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["max_depth"] == 3


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.startswith("dimcontent ")
