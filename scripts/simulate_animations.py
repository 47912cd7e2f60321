#!/usr/bin/env python3
"""
Animation Timeline Simulator

Mounts the page's animated elements on a virtual clock, scrolls through the page at
a constant speed, and prints when each element reveals and how counters, the
typewriter and skill bars progress. Useful for tuning stagger delays without a browser.

Examples:\n

    simulate_animations.py run                          # Default scroll speed

    simulate_animations.py run --scroll-speed 2.5       # Faster scrolling (px/ms)

    simulate_animations.py run --step 250 --verbose     # Snapshot every 250 ms
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.animation.logger import _log_info, setup_animation_logger
from folio.contexts.composition import build_timeline, load_profile
from folio.contexts.composition.defaults import SECTION_HEIGHTS
from folio.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Simulate the page's scroll-triggered animations on a virtual clock",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("run")
def run_command(
    scroll_speed: Annotated[
        float,
        typer.Option("--scroll-speed", "-s", help="Scroll speed in px per ms", min=0.0),
    ] = 1.0,
    duration: Annotated[
        Optional[float],
        typer.Option("--duration", "-d", help="Simulated time in ms (default: until page end)"),
    ] = None,
    step: Annotated[
        float,
        typer.Option("--step", help="Sampling step in ms", min=1.0),
    ] = 100.0,
    viewport_height: Annotated[
        float,
        typer.Option("--viewport-height", help="Viewport height in px", min=100.0),
    ] = 900.0,
    profile_path: Annotated[
        Optional[Path],
        typer.Option("--profile", "-p", help="Profile YAML (default: packaged profile)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print a full snapshot at every step"),
    ] = False,
):
    """
    Scroll through the page and report reveal times.

    Examples:\n

        $ simulate_animations.py run

        $ simulate_animations.py run -s 0.5 --duration 8000
    """
    setup_animation_logger(LOGS_PATH / f"animate_{now()}")

    profile = load_profile(profile_path)
    timeline = build_timeline(profile, viewport_height=viewport_height)

    page_height = sum(SECTION_HEIGHTS.values())
    max_scroll = max(0.0, page_height - viewport_height)
    if duration is None:
        # Long enough to reach the bottom and let the last transitions finish
        duration = (max_scroll / scroll_speed if scroll_speed > 0 else 0.0) + 3000.0

    _log_info(f"Simulating {duration:.0f}ms at {scroll_speed}px/ms, viewport {viewport_height:.0f}px")
    typer.secho(f"\nSimulating {profile.name}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"  Page height: {page_height}px, viewport: {viewport_height:.0f}px\n")

    seen = set()
    elapsed = 0.0
    try:
        while elapsed <= duration:
            timeline.scroll_to(min(max_scroll, elapsed * scroll_speed))
            for name in timeline.revealed():
                if name not in seen:
                    seen.add(name)
                    typer.echo(f"  {elapsed:>7.0f}ms  reveal  {name}")
            if verbose:
                typer.echo(f"  {elapsed:>7.0f}ms  {timeline.snapshot()}")
            timeline.advance(step)
            elapsed += step

        final = timeline.snapshot()
    finally:
        timeline.dispose()

    typer.echo("")
    typer.secho(f"✓ {len(seen)}/{len(final['reveal'])} elements revealed", fg=typer.colors.GREEN, bold=True)
    for name, display in final["counter"].items():
        typer.echo(f"  counter    {name}: {display}")
    for name, text in final["typewriter"].items():
        typer.echo(f"  typewriter {name}: {text!r}")
    filled = sum(1 for width in final["skill_bar"].values() if width > 0)
    typer.echo(f"  skill bars filled: {filled}/{len(final['skill_bar'])}")
    typer.echo("")


if __name__ == "__main__":
    app()
