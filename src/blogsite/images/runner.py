"""Sequential hero image generation run."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from blogsite.images.client import ImageGenerationClient
from blogsite.images.specs import ImageSpec

logger = logging.getLogger(__name__)

_PROMPT_PREVIEW_CHARS = 100


class HeroImageRunner:
    """Turn a list of ImageSpecs into image files, one at a time.

    Specs are processed strictly in order. The first failure aborts the
    run; images already written stay on disk.
    """

    def __init__(
        self,
        client: ImageGenerationClient,
        specs: Sequence[ImageSpec],
        *,
        pause_seconds: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.client = client
        self.specs = tuple(specs)
        self.pause_seconds = pause_seconds
        self._sleep = sleep

    def run(self) -> list[Path]:
        """Generate and download every spec.

        Returns:
            Paths of the written files, in spec order.

        Raises:
            BlogSiteError: From the first spec that fails.
        """
        logger.info("Starting hero image generation (%d images)", len(self.specs))
        written: list[Path] = []

        for spec in self.specs:
            logger.info("Prompt: %s...", spec.prompt[:_PROMPT_PREVIEW_CHARS])

            image_url = self.client.generate(spec)
            logger.info("Generated image URL: %s", image_url)

            written.append(self.client.download(image_url, spec.filename))

            # Fixed courtesy delay, applied after every image
            if self.pause_seconds > 0:
                self._sleep(self.pause_seconds)

        logger.info("All hero images generated successfully")
        for path in written:
            logger.info("  %s", path)
        return written
