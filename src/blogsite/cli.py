"""CLI interface for blogsite."""

import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from blogsite.config import BlogSiteConfig, load_config
from blogsite.errors import BlogSiteError, ConfigurationError
from blogsite.images import HERO_IMAGE_SPECS, HeroImageRunner, ImageGenerationClient
from blogsite.mirror import write_index_markdown
from blogsite.site import SHARE_LINKS, active_socials, share_url

app = typer.Typer(
    name="blogsite",
    help="Tooling for the dirkhierold.de blog: hero images, links and the markdown mirror.",
)

hero_images_app = typer.Typer(
    name="generate-hero-images",
    help="Generate hero images for blog posts via the OpenAI image API.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


def _load_config() -> BlogSiteConfig:
    try:
        return load_config()
    except ConfigurationError as exc:
        _fail(str(exc))


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from blogsite import __version__

        console.print(f"blogsite {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """blogsite - tooling for the dirkhierold.de blog."""
    _configure_logging(verbose)


def run_hero_images() -> list[Path]:
    """Generate every default hero image, exiting 1 on the first failure."""
    config = _load_config()

    try:
        client = ImageGenerationClient(config.images, config.image_output_dir())
    except ConfigurationError as exc:
        _fail(str(exc))

    runner = HeroImageRunner(
        client,
        HERO_IMAGE_SPECS,
        pause_seconds=config.images.pause_seconds,
    )
    try:
        written = runner.run()
    except (BlogSiteError, OSError) as exc:
        _fail(f"Could not generate images: {exc}")

    console.print()
    console.print("[bold green]All hero images generated successfully![/bold green]")
    console.print("Generated files:")
    for path in written:
        console.print(f"  - {path}")
    return written


@app.command("hero-images")
def hero_images_cmd() -> None:
    """Generate hero images for every configured blog post."""
    run_hero_images()


@hero_images_app.command()
def generate_hero_images() -> None:
    """Generate hero images for every configured blog post.

    Requires OPENAI_API_KEY in the environment. Existing images are
    regenerated and overwritten.
    """
    _configure_logging()
    run_hero_images()


@app.command()
def mirror(
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Directory for index.md. Defaults to <site root>/public.",
        ),
    ] = None,
) -> None:
    """Write the markdown-only home page (index.md)."""
    config = _load_config()
    output_dir = output or config.public_dir()

    try:
        path = write_index_markdown(output_dir)
    except OSError as exc:
        _fail(f"Could not write markdown mirror: {exc}")

    console.print(f"[green]Wrote[/green] {path}")


@app.command()
def links(
    post_url: Annotated[
        Optional[str],
        typer.Option("--post-url", "-u", help="Post URL to build share links for."),
    ] = None,
) -> None:
    """Show social profile links and, optionally, share links for a post."""
    socials = Table(title="Social links")
    socials.add_column("Name")
    socials.add_column("URL")
    for link in active_socials():
        socials.add_row(link.name, link.href)
    console.print(socials)

    if post_url is None:
        return

    shares = Table(title="Share links")
    shares.add_column("Name")
    shares.add_column("URL", overflow="fold")
    for link in SHARE_LINKS:
        shares.add_row(link.name, share_url(link, post_url))
    console.print(shares)
