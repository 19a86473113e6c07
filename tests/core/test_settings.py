"""Tests for dimcontent.core.settings module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from dimcontent.core.settings import DimContentSettings, clear_settings_cache, get_settings


class TestDimContentSettings:
    def test_defaults(self):
        settings = DimContentSettings(_env_file=None)
        assert settings.max_depth == 3
        assert settings.debug is False
        assert settings.log_format == "json"
        assert settings.scheme == "https"
        assert settings.default_site is None
        assert settings.templates_dir == Path("config/templates")

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("DIMCONTENT_MAX_DEPTH", "5")
        monkeypatch.setenv("DIMCONTENT_DEBUG", "true")
        monkeypatch.setenv("DIMCONTENT_DEFAULT_SITE", "website")
        settings = DimContentSettings(_env_file=None)
        assert settings.max_depth == 5
        assert settings.debug is True
        assert settings.default_site == "website"

    def test_log_format_normalized(self):
        assert DimContentSettings(log_format="CONSOLE", _env_file=None).log_format == "console"

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            DimContentSettings(log_format="xml", _env_file=None)

    def test_invalid_scheme(self):
        with pytest.raises(ValidationError):
            DimContentSettings(scheme="ftp", _env_file=None)

    def test_negative_max_depth(self):
        with pytest.raises(ValidationError):
            DimContentSettings(max_depth=-1, _env_file=None)


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload(self):
        first = get_settings()
        assert get_settings(_force_reload=True) is not first

    def test_clear_cache(self):
        first = get_settings()
        clear_settings_cache()
        assert get_settings() is not first

    def test_env_file(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("DIMCONTENT_HOST=example.org\n")
        assert get_settings(env_file=env_file).host == "example.org"
