"""Hero image generation for blog posts."""

from blogsite.images.client import ImageGenerationClient
from blogsite.images.runner import HeroImageRunner
from blogsite.images.specs import HERO_IMAGE_SPECS, ImageSpec, duplicate_filenames

__all__ = [
    "HERO_IMAGE_SPECS",
    "HeroImageRunner",
    "ImageGenerationClient",
    "ImageSpec",
    "duplicate_filenames",
]
