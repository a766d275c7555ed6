"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from blogsite.config import BlogSiteConfig, ImagesConfig, load_config
from blogsite.errors import ConfigurationError


class TestDefaults:
    def test_image_defaults(self):
        cfg = BlogSiteConfig()
        assert cfg.images.model == "dall-e-3"
        assert cfg.images.size == "1024x1024"
        assert cfg.images.quality == "standard"
        assert cfg.images.style == "natural"
        assert cfg.images.pause_seconds == 2.0
        assert cfg.images.timeout is None
        assert cfg.images.api_url == "https://api.openai.com/v1/images/generations"

    def test_not_configured_without_key(self):
        assert ImagesConfig().is_configured is False

    def test_require_api_key_raises(self):
        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
            ImagesConfig().require_api_key()

    def test_require_api_key_returns_key(self):
        assert ImagesConfig(api_key="sk-test").require_api_key() == "sk-test"

    def test_image_output_dir_relative_to_site_root(self, tmp_path: Path):
        cfg = BlogSiteConfig.model_validate({"site": {"root": str(tmp_path)}})
        assert cfg.image_output_dir() == tmp_path / "public" / "assets"
        assert cfg.public_dir() == tmp_path / "public"

    def test_absolute_output_dir_ignores_site_root(self, tmp_path: Path):
        cfg = BlogSiteConfig.model_validate({
            "site": {"root": "/somewhere/else"},
            "images": {"output_dir": str(tmp_path / "out")},
        })
        assert cfg.image_output_dir() == tmp_path / "out"


class TestLoadConfig:
    def test_no_file_returns_defaults(self):
        cfg = load_config()
        assert cfg == BlogSiteConfig()

    def test_reads_file_in_cwd(self, tmp_path: Path):
        (tmp_path / ".blogsite.toml").write_text(
            '[images]\nmodel = "dall-e-2"\npause_seconds = 0.5\n'
        )
        cfg = load_config()
        assert cfg.images.model == "dall-e-2"
        assert cfg.images.pause_seconds == 0.5

    def test_reads_global_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        global_path = tmp_path / "global.toml"
        global_path.write_text('[site]\nroot = "/srv/blog"\n')
        monkeypatch.setattr("blogsite.config.GLOBAL_CONFIG_PATH", global_path)

        assert load_config().site.root == "/srv/blog"

    def test_explicit_path(self, tmp_path: Path):
        path = tmp_path / "custom.toml"
        path.write_text('[images]\nstyle = "vivid"\n')
        assert load_config(path).images.style == "vivid"

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "missing.toml") == BlogSiteConfig()

    def test_invalid_toml_uses_defaults(self, tmp_path: Path):
        (tmp_path / ".blogsite.toml").write_text("[images\nmodel = ")
        assert load_config() == BlogSiteConfig()

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / ".blogsite.toml").write_text(
            '[images]\nmodel = "dall-e-2"\napi_key = "from-file"\n'
        )
        monkeypatch.setenv("OPENAI_API_KEY", "from-env")
        monkeypatch.setenv("BLOGSITE_IMAGE_MODEL", "dall-e-3")
        monkeypatch.setenv("BLOGSITE_IMAGE_PAUSE", "0")
        monkeypatch.setenv("BLOGSITE_SITE_ROOT", "/tmp/site")

        cfg = load_config()

        assert cfg.images.api_key == "from-env"
        assert cfg.images.model == "dall-e-3"
        assert cfg.images.pause_seconds == 0.0
        assert cfg.site.root == "/tmp/site"

    def test_api_key_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        assert load_config().images.is_configured is True

    def test_invalid_env_value_raises_configuration_error(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BLOGSITE_IMAGE_PAUSE", "two")
        with pytest.raises(ConfigurationError, match="images.pause_seconds"):
            load_config()

    def test_invalid_file_value_raises_configuration_error(self, tmp_path: Path):
        (tmp_path / ".blogsite.toml").write_text('[images]\npause_seconds = "x"\n')
        with pytest.raises(ConfigurationError, match="config file"):
            load_config()
