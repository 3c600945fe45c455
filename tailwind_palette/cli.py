"""Command-line interface for tailwind-palette."""

import asyncio
import logging
from functools import partial
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from tailwind_palette import __version__ as TAILWIND_PALETTE_VERSION
from tailwind_palette.collector import AskColor, ColorRegistries, ask_color_entry, collect_colors
from tailwind_palette.colors import hex_to_rgb, normalize_hex
from tailwind_palette.config import GeneratorConfig, load_config_from_env
from tailwind_palette.emitter import Artifact, WriteResult, emit_artifacts, report_results
from tailwind_palette.formatters import render_config, render_stylesheet
from tailwind_palette.shades import ShadeDeriver, derive_shades

app = typer.Typer(
    name="tailwind-palette",
    help="Generate Tailwind CSS color shades backed by CSS custom properties",
    invoke_without_command=True,
)
console = Console()

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup logging configuration.

    Args:
        verbose: Enable verbose logging
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def build_artifacts(registries: ColorRegistries, config: GeneratorConfig) -> list[Artifact]:
    """Render both generated files from the collected colors."""
    return [
        Artifact(
            filename=config.config_file,
            content=render_config(registries.theme),
            label="Tailwind CSS configuration",
        ),
        Artifact(
            filename=config.stylesheet_file,
            content=render_stylesheet(registries.styles),
            label="CSS variables",
        ),
    ]


def generate(
    config: GeneratorConfig,
    ask: Optional[AskColor] = None,
    derive: ShadeDeriver = derive_shades,
) -> list[WriteResult]:
    """Collect colors, render both files and wait for both writes.

    Args:
        config: Output locations and color limit
        ask: Source of colors; prompts on the console when omitted
        derive: Shade scale derivation

    Returns:
        One write result per generated file
    """
    if ask is None:
        ask = partial(ask_color_entry, console=console)

    registries = collect_colors(ask, derive=derive, max_colors=config.max_colors)
    logger.info(f"Collected {len(registries)} colors")

    artifacts = build_artifacts(registries, config)
    results = asyncio.run(emit_artifacts(artifacts, config.output_dir))
    report_results(results, console)
    return results


def _resolve_config(
    output_dir: Optional[Path],
    config_file: Optional[str],
    stylesheet_file: Optional[str],
    max_colors: Optional[int],
) -> GeneratorConfig:
    config = load_config_from_env()
    overrides = {
        "output_dir": output_dir,
        "config_file": config_file,
        "stylesheet_file": stylesheet_file,
        "max_colors": max_colors,
    }
    values = config.model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})
    return GeneratorConfig(**values)


@app.callback(invoke_without_command=True)
def run(
    ctx: typer.Context,
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory to write the generated files to (default: current directory)",
    ),
    config_file: Optional[str] = typer.Option(
        None,
        "--config-file",
        help="Tailwind configuration filename (default: tailwind.config.js)",
    ),
    stylesheet_file: Optional[str] = typer.Option(
        None,
        "--stylesheet-file",
        help="CSS variables filename (default: colors.css)",
    ),
    max_colors: Optional[int] = typer.Option(
        None,
        "--max-colors",
        help="Maximum number of colors to ask for, 1 to 5 (default: 5)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
):
    """Generate Tailwind CSS colors from a few base colors.

    Running 'tailwind-palette' asks for up to five named colors, derives a
    shade scale for each and writes a Tailwind configuration plus a
    stylesheet declaring one CSS custom property per shade.

    Examples:
        # Write tailwind.config.js and colors.css to the current directory
        tailwind-palette

        # Write into another directory
        tailwind-palette --output-dir src/styles

        # Preview the shades of a single color
        tailwind-palette shades 3366FF
    """
    setup_logging(verbose)

    # If a subcommand is invoked, let it handle execution
    if ctx.invoked_subcommand is not None:
        return

    try:
        config = _resolve_config(output_dir, config_file, stylesheet_file, max_colors)
    except ValidationError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    try:
        generate(config)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(0)


@app.command()
def shades(
    color: str = typer.Argument(..., help="Base color as 3 or 6 hex digits"),
):
    """Preview the shade scale derived from a color."""
    try:
        scale = derive_shades(color)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Shades of #{normalize_hex(color)}")
    table.add_column("Shade", justify="right")
    table.add_column("Hex")
    table.add_column("RGB")
    table.add_column("Swatch")
    for label, value in scale.items():
        table.add_row(label, value, hex_to_rgb(value), f"[on {value}]      [/]")
    console.print(table)


@app.command()
def version():
    """Show version information."""
    console.print(f"tailwind-palette v{TAILWIND_PALETTE_VERSION}")


def main():
    """Run the command-line application."""
    app()


if __name__ == "__main__":
    main()
