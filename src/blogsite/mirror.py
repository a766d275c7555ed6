"""Markdown-only mirror of the home page, served at ``/index.md``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from blogsite.site import SITE, SiteMetadata

logger = logging.getLogger(__name__)

MIRROR_FILENAME = "index.md"
MIRROR_STATUS = 200
MIRROR_HEADERS: dict[str, str] = {
    "Content-Type": "text/plain; charset=utf-8",
    "Cache-Control": "public, max-age=3600",
}

NAVIGATION: tuple[tuple[str, str], ...] = (
    ("About", "/about.md"),
    ("Recent Posts", "/posts.md"),
    ("Archives", "/archives.md"),
    ("RSS Feed", "/rss.xml"),
)


@dataclass
class MirrorResponse:
    """Status, headers and body of the mirror route."""

    status: int
    body: str
    headers: dict[str, str] = field(default_factory=lambda: dict(MIRROR_HEADERS))


def render_index_markdown(site: SiteMetadata = SITE) -> str:
    """Render the markdown version of the home page."""
    lines = [
        f"# {site.author}",
        "",
        site.description,
        "",
        "## Navigation",
        "",
    ]
    lines.extend(f"- [{label}]({href})" for label, href in NAVIGATION)
    lines.extend([
        "",
        "## Links",
        "",
        f"- Twitter: [@{site.twitter}](https://twitter.com/{site.twitter})",
        f"- GitHub: [@{site.github}](https://github.com/{site.github})",
        f"- Email: {site.email}",
        "",
        "---",
        "",
        f"*This is the markdown-only version of {site.domain}. "
        f"Visit [{site.domain}]({site.url}) for the full experience.*",
    ])
    return "\n".join(lines)


def mirror_response(site: SiteMetadata = SITE) -> MirrorResponse:
    """Build the full response for a GET on the mirror route."""
    return MirrorResponse(status=MIRROR_STATUS, body=render_index_markdown(site))


def write_index_markdown(output_dir: Path, site: SiteMetadata = SITE) -> Path:
    """Write the mirror page to ``output_dir/index.md``.

    Returns:
        Path of the written file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / MIRROR_FILENAME
    path.write_text(render_index_markdown(site), encoding="utf-8")
    logger.info("Wrote markdown mirror to %s", path)
    return path
