"""Client for the OpenAI image generation API.

Generates one image per call and downloads the returned URL to disk.
Requests go through urllib; nothing is retried.
"""

from __future__ import annotations

import contextlib
import http.client
import json
import logging
import shutil
import urllib.error
import urllib.request
from pathlib import Path

from blogsite.config import ImagesConfig
from blogsite.errors import DownloadError, GenerationAPIError
from blogsite.images.specs import ImageSpec

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


class ImageGenerationClient:
    """Generate images via the OpenAI API and save them locally."""

    def __init__(self, config: ImagesConfig, output_dir: Path) -> None:
        self.config = config
        self.output_dir = output_dir
        self._api_key = config.require_api_key()

    def _urlopen(self, req: urllib.request.Request | str):
        if self.config.timeout is None:
            return urllib.request.urlopen(req)
        return urllib.request.urlopen(req, timeout=self.config.timeout)

    def build_request_body(self, spec: ImageSpec) -> dict:
        """Request payload for one spec; only the prompt varies."""
        return {
            "model": self.config.model,
            "prompt": spec.prompt,
            "n": 1,
            "size": self.config.size,
            "quality": self.config.quality,
            "style": self.config.style,
        }

    def generate(self, spec: ImageSpec) -> str:
        """Ask the API for one image and return its temporary URL.

        Raises:
            GenerationAPIError: On a non-200 response or transport failure.
        """
        logger.info("Generating image for: %s", spec.blog_post)

        body = json.dumps(self.build_request_body(spec)).encode("utf-8")
        req = urllib.request.Request(
            self.config.api_url,
            data=body,
            method="POST",
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._api_key}",
            },
        )

        try:
            with self._urlopen(req) as resp:
                status = resp.status
                payload = resp.read()
        except urllib.error.HTTPError as exc:
            raw = exc.read().decode("utf-8", errors="replace")
            raise GenerationAPIError(exc.code, raw) from exc
        except urllib.error.URLError as exc:
            raise GenerationAPIError(None, str(exc.reason)) from exc
        except (OSError, http.client.HTTPException) as exc:
            raise GenerationAPIError(None, str(exc)) from exc

        raw = payload.decode("utf-8", errors="replace")

        if status != 200:
            raise GenerationAPIError(status, raw)

        try:
            return json.loads(raw)["data"][0]["url"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise GenerationAPIError(status, f"Unexpected response body: {raw}") from exc

    def download(self, image_url: str, filename: str) -> Path:
        """Stream ``image_url`` into ``output_dir/filename``.

        Existing files are overwritten. On a transport error the partial
        file is removed before the error propagates.

        Returns:
            Path of the written file, once it has been closed.

        Raises:
            DownloadError: If the image could not be fetched.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        file_path = self.output_dir / filename

        try:
            resp = self._urlopen(image_url)
        except (OSError, http.client.HTTPException) as exc:
            raise DownloadError(f"Failed to download {image_url}: {exc}") from exc

        with resp:
            try:
                with open(file_path, "wb") as f:
                    shutil.copyfileobj(resp, f, _CHUNK_SIZE)
            except (OSError, http.client.HTTPException) as exc:
                with contextlib.suppress(OSError):
                    file_path.unlink()
                raise DownloadError(f"Failed to download {image_url}: {exc}") from exc

        logger.info("Saved: %s", filename)
        return file_path
