"""Site metadata, social profile links and share-link templates."""

from __future__ import annotations

import urllib.parse
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict


class SiteMetadata(BaseModel):
    """Identity of the blog as rendered on every page."""

    model_config = ConfigDict(frozen=True)

    title: str
    author: str
    url: str
    description: str
    email: str
    github: str
    twitter: str

    @property
    def domain(self) -> str:
        return urllib.parse.urlparse(self.url).netloc


class SocialLink(BaseModel):
    """A profile link shown in the site header and footer."""

    model_config = ConfigDict(frozen=True)

    name: str
    href: str
    link_title: str
    icon: str
    active: bool = True


class ShareLink(BaseModel):
    """A share intent; the post URL is appended to ``href``."""

    model_config = ConfigDict(frozen=True)

    name: str
    href: str
    link_title: str
    icon: str


SITE = SiteMetadata(
    title="Dirk Hierold",
    author="Dirk Hierold",
    url="https://dirkhierold.de",
    description=(
        "AI-powered tools from Swift roots to web frontiers. "
        "Every commit lands on GitHub for you to fork & remix."
    ),
    email="dirk@dirkhierold.de",
    github="DirkHierold",
    twitter="DirkHierold",
)

SOCIALS: tuple[SocialLink, ...] = (
    SocialLink(
        name="Github",
        href=f"https://github.com/{SITE.github}",
        link_title=f" {SITE.title} on Github",
        icon="github",
    ),
    SocialLink(
        name="Mail",
        href=f"mailto:{SITE.email}",
        link_title=f"Send an email to {SITE.title}",
        icon="mail",
    ),
)

SHARE_LINKS: tuple[ShareLink, ...] = (
    ShareLink(
        name="BlueSky",
        href="https://bsky.app/intent/compose?text=",
        link_title="Share this post on BlueSky",
        icon="bluesky",
    ),
    ShareLink(
        name="LinkedIn",
        href="https://www.linkedin.com/sharing/share-offsite/?url=",
        link_title="Share this post on LinkedIn",
        icon="linkedin",
    ),
    ShareLink(
        name="WhatsApp",
        href="https://wa.me/?text=",
        link_title="Share this post via WhatsApp",
        icon="whatsapp",
    ),
    ShareLink(
        name="Facebook",
        href="https://www.facebook.com/sharer.php?u=",
        link_title="Share this post on Facebook",
        icon="facebook",
    ),
    ShareLink(
        name="Telegram",
        href="https://t.me/share/url?url=",
        link_title="Share this post via Telegram",
        icon="telegram",
    ),
    ShareLink(
        name="Pinterest",
        href="https://pinterest.com/pin/create/button/?url=",
        link_title="Share this post on Pinterest",
        icon="pinterest",
    ),
    ShareLink(
        name="Mail",
        href="mailto:?subject=See%20this%20post&body=",
        link_title="Share this post via email",
        icon="mail",
    ),
)


def active_socials(links: Iterable[SocialLink] = SOCIALS) -> list[SocialLink]:
    """Social links flagged active, in their configured order."""
    return [link for link in links if link.active]


def share_url(link: ShareLink, post_url: str) -> str:
    """Build the share URL for ``post_url``.

    Args:
        link: Share target whose href ends where the post URL goes.
        post_url: Absolute URL of the post being shared.

    Returns:
        ``link.href`` followed by the percent-encoded post URL.
    """
    return link.href + urllib.parse.quote(post_url, safe="")
