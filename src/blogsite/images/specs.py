"""Hero image specifications for blog posts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict


class ImageSpec(BaseModel):
    """A single hero image to generate.

    ``filename`` must be unique within a list of specs; a duplicate
    silently overwrites the earlier image.
    """

    model_config = ConfigDict(frozen=True)

    filename: str
    prompt: str
    blog_post: str  # label for log output only


HERO_IMAGE_SPECS: tuple[ImageSpec, ...] = (
    ImageSpec(
        filename="slime-evolution-hero.png",
        prompt=(
            "A modern, professional illustration showing the evolution of game "
            "development. Feature multiple colorful slime enemies (green, blue, pink) "
            "with visible animation frames and physics collision boundaries. Include "
            "elements suggesting programming like code snippets, sprite sheets, and "
            "game development tools. Use a tech-focused color palette with blues and "
            "greens. Style should be clean, minimalist, and suitable for a technical "
            "blog header."
        ),
        blog_post="Game Development - Slime Evolution",
    ),
    ImageSpec(
        filename="attack-animations-hero.png",
        prompt=(
            "A dynamic, professional illustration depicting enemy AI and attack "
            "animations in game development. Show animated sprite sequences, collision "
            "detection systems, and attack patterns with geometric shapes representing "
            "hitboxes. Include elements like state machines, animation timelines, and "
            "game programming concepts. Use vibrant colors suggesting action and "
            "movement. Style should be technical yet engaging, perfect for a game "
            "development blog post."
        ),
        blog_post="Attack Animations Implementation",
    ),
    ImageSpec(
        filename="adaptive-learning-hero.png",
        prompt=(
            "A clean, educational technology illustration showing adaptive learning "
            "systems. Feature mathematical formulas, progress charts, learning paths, "
            "and student engagement metrics. Include elements like level progression, "
            "badges, and educational interfaces. Use professional blues and greens "
            "with accents of orange for learning progress. Style should be modern, "
            "approachable, and suitable for an education technology blog."
        ),
        blog_post="Adaptive Learning Platform",
    ),
    ImageSpec(
        filename="educational-software-refinement-hero.png",
        prompt=(
            "A minimalist, professional illustration representing software refinement "
            "and user experience optimization. Show before/after interfaces, simplified "
            "user flows, and clean design elements. Include subtle references to bug "
            "fixes, code optimization, and UX improvements. Use a sophisticated color "
            "palette with blues, grays, and subtle accent colors. Style should "
            "emphasize clarity, simplicity, and professional software development."
        ),
        blog_post="Educational Software UX Refinement",
    ),
    ImageSpec(
        filename="visual-storytelling-hero.png",
        prompt=(
            "A modern, artistic illustration representing visual storytelling and blog "
            "design. Feature elements like hero images, blog layouts, typography, and "
            "visual hierarchy. Include subtle references to AI image generation, "
            "content creation, and digital publishing. Use a creative color palette "
            "with rich blues, purples, and gold accents. Style should be sophisticated "
            "and suitable for a blog about content creation and design."
        ),
        blog_post="Visual Storytelling - Hero Images",
    ),
)


def duplicate_filenames(specs: Iterable[ImageSpec]) -> list[str]:
    """Return filenames that appear more than once, in first-seen order."""
    counts = Counter(spec.filename for spec in specs)
    return [name for name, count in counts.items() if count > 1]
