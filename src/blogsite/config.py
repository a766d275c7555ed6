"""Unified configuration loaded from .blogsite.toml and env vars.

Loading order: defaults → TOML file → env vars.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from blogsite.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".blogsite.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
]
GLOBAL_CONFIG_PATH = Path.home() / ".config" / "blogsite" / "config.toml"

API_KEY_ENV = "OPENAI_API_KEY"


class SiteSectionConfig(BaseModel):
    """[site] section."""

    root: str = "."

    @property
    def root_path(self) -> Path:
        return Path(self.root).expanduser()


class ImagesConfig(BaseModel):
    """[images] section: hero image generation.

    The request options are shared by every image in a run; they are
    never varied per image.
    """

    api_key: str = ""
    api_url: str = "https://api.openai.com/v1/images/generations"
    model: str = "dall-e-3"
    size: str = "1024x1024"
    quality: str = "standard"
    style: str = "natural"
    pause_seconds: float = 2.0
    output_dir: str = "public/assets"
    timeout: float | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def require_api_key(self) -> str:
        """Return the API key or raise if it is not set."""
        if not self.api_key:
            raise ConfigurationError(
                f"{API_KEY_ENV} environment variable is not set. "
                f'Set it with: export {API_KEY_ENV}="your-api-key-here"'
            )
        return self.api_key


class BlogSiteConfig(BaseModel):
    """Top-level configuration model."""

    site: SiteSectionConfig = Field(default_factory=SiteSectionConfig)
    images: ImagesConfig = Field(default_factory=ImagesConfig)

    def image_output_dir(self) -> Path:
        """Directory hero images are written to."""
        output = Path(self.images.output_dir).expanduser()
        if output.is_absolute():
            return output
        return self.site.root_path / output

    def public_dir(self) -> Path:
        """The site's ``public/`` directory."""
        return self.site.root_path / "public"


def load_config(path: str | Path | None = None) -> BlogSiteConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .blogsite.toml in CWD
    3. ~/.config/blogsite/config.toml

    Then overlay environment variables.

    Args:
        path: Explicit path to a TOML file.

    Returns:
        Merged BlogSiteConfig.

    Raises:
        ConfigurationError: If the file or environment holds invalid values.
    """
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        for search_dir in CONFIG_SEARCH_PATHS:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                data = _load_toml(candidate)
                logger.info("Loaded config from %s", candidate)
                break
        if not data and GLOBAL_CONFIG_PATH.exists():
            data = _load_toml(GLOBAL_CONFIG_PATH)
            logger.info("Loaded config from %s", GLOBAL_CONFIG_PATH)

    config = _validate(data, "config file") if data else BlogSiteConfig()

    return _apply_env_vars(config)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}


def _apply_env_vars(config: BlogSiteConfig) -> BlogSiteConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, tuple[str, str]] = {
        API_KEY_ENV: ("images", "api_key"),
        "BLOGSITE_SITE_ROOT": ("site", "root"),
        "BLOGSITE_IMAGE_MODEL": ("images", "model"),
        "BLOGSITE_IMAGE_PAUSE": ("images", "pause_seconds"),
    }

    for env_var, (section, field) in env_mapping.items():
        value = os.environ.get(env_var)
        if value:
            data[section][field] = value

    return _validate(data, "environment")


def _validate(data: dict[str, object], source: str) -> BlogSiteConfig:
    """Validate raw config data, reporting bad values as ConfigurationError."""
    try:
        return BlogSiteConfig.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration from {source}: {problems}") from exc
