"""Error types shared across blogsite."""

from __future__ import annotations


class BlogSiteError(Exception):
    """Base error for blogsite operations."""


class ConfigurationError(BlogSiteError):
    """Required configuration (e.g. an API credential) is missing."""


class GenerationAPIError(BlogSiteError):
    """The image generation API rejected a request or could not be reached.

    Attributes:
        status: HTTP status code, or None when no response was received.
        body: Raw response body (or the transport error text).
    """

    def __init__(self, status: int | None, body: str) -> None:
        self.status = status
        self.body = body
        if status is None:
            message = f"API request failed: {body}"
        else:
            message = f"API request failed with status {status}: {body}"
        super().__init__(message)


class DownloadError(BlogSiteError):
    """Downloading a generated image failed."""
