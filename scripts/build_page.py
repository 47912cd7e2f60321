#!/usr/bin/env python3
"""
Site Build CLI

Renders the portfolio page from a profile YAML file.

Commands:
    build    - Write index.html (interactive), cv.html (print snapshot) and animations.js
    sections - List the sections rendered, in page order

Examples:\n

    build_page.py build                                # Packaged profile into ./site

    build_page.py build --output-dir public            # Custom output directory

    build_page.py build --profile data/me.yaml         # Custom profile
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from jinja2 import TemplateNotFound
from typing_extensions import Annotated

from folio.contexts.composition import InvalidProfileError, TemplateRenderError, build_site, load_profile
from folio.contexts.composition.defaults import DEFAULT_PROFILE_PATH, SECTION_ORDER
from folio.contexts.composition.logger import setup_composition_logger
from folio.utils.timestamp import now

load_dotenv()
SITE_PATH = Path(os.getenv("FOLIO_SITE_PATH", "site"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Build the portfolio site from a profile",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("build")
def build_command(
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", help="Directory for the generated site files"),
    ] = SITE_PATH,
    profile_path: Annotated[
        Optional[Path],
        typer.Option("--profile", "-p", help="Profile YAML (default: packaged profile)"),
    ] = None,
):
    """
    Render the interactive page and the print snapshot.

    Examples:\n

        $ build_page.py build

        $ build_page.py build -o public -p data/me.yaml
    """
    setup_composition_logger(LOGS_PATH / f"compose_{now()}", profile_path or DEFAULT_PROFILE_PATH)

    try:
        profile = load_profile(profile_path)
        written = build_site(output_dir, profile)
    except (FileNotFoundError, InvalidProfileError, TemplateNotFound, TemplateRenderError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho("\n✓ Site built", fg=typer.colors.GREEN, bold=True)
    for kind, path in written.items():
        typer.echo(f"  {kind}: {path}")
    typer.echo("")


@app.command("sections")
def sections_command():
    """List page sections in render order."""
    for name in SECTION_ORDER:
        typer.echo(name)


if __name__ == "__main__":
    app()
