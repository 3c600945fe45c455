"""Interactive color collection and token registries."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import IO

from rich.console import Console

from tailwind_palette.colors import hex_to_rgb, normalize_hex
from tailwind_palette.prompts import COLOR_FIELDS, ask_fields
from tailwind_palette.shades import BASE_SHADE, ShadeDeriver, derive_shades

logger = logging.getLogger(__name__)

# Hard cap on colors collected in one run
MAX_COLORS = 5

DEFAULT_KEY = "DEFAULT"


@dataclass(frozen=True)
class ColorEntry:
    """A named base color supplied by the user."""

    name: str
    base_hex: str  # Six upper-case hex digits, no "#"


# Prompt callback: returns the entry and whether to ask for another one
AskColor = Callable[[], tuple[ColorEntry, bool]]


def css_variable(name: str, shade: str) -> str:
    """Name of the CSS custom property for a color shade."""
    return f"--color-{name}-{shade}"


def config_reference(name: str, shade: str) -> str:
    """Tailwind color value reading a shade's custom property."""
    return f"rgb(var({css_variable(name, shade)}) / <alpha-value>)"


@dataclass
class ColorRegistries:
    """Tailwind and CSS token sets, keyed by color name in entry order."""

    theme: dict[str, dict[str, str]] = field(default_factory=dict)
    styles: dict[str, dict[str, str]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.styles)

    def add(self, name: str, shades: Mapping[str, str]) -> None:
        """Register every shade of a color.

        A color registered twice under the same name replaces the earlier
        token sets.
        """
        config_vars = {DEFAULT_KEY: config_reference(name, BASE_SHADE)}
        css_vars: dict[str, str] = {}
        for shade_key, shade_hex in shades.items():
            config_vars[shade_key] = config_reference(name, shade_key)
            css_vars[shade_key] = f"{css_variable(name, shade_key)}: {hex_to_rgb(shade_hex)};"

        self.theme[name] = config_vars
        self.styles[name] = css_vars


def ask_color_entry(
    *,
    console: Console | None = None,
    stream: IO[str] | None = None,
) -> tuple[ColorEntry, bool]:
    """Ask the three questions for one color."""
    answers = ask_fields(COLOR_FIELDS, console=console, stream=stream)
    entry = ColorEntry(
        name=answers["color_name"].strip(),
        base_hex=normalize_hex(answers["color_hex"]),
    )
    return entry, bool(answers["add_another"])


def collect_colors(
    ask: AskColor,
    derive: ShadeDeriver = derive_shades,
    max_colors: int = MAX_COLORS,
) -> ColorRegistries:
    """Collect colors until the user stops or the limit is reached.

    Args:
        ask: Returns the next color and whether to continue afterwards.
        derive: Shade scale for a base hex color.
        max_colors: Limit on colors; never more than ``MAX_COLORS``.

    Returns:
        The populated registries.
    """
    limit = max(1, min(max_colors, MAX_COLORS))
    registries = ColorRegistries()
    count = 0

    while count < limit:
        entry, add_another = ask()
        shades = derive(entry.base_hex)
        registries.add(entry.name, shades)
        logger.debug("Added color %s (#%s) with %d shades", entry.name, entry.base_hex, len(shades))

        count += 1
        if not add_another:
            break

    if count == limit and add_another:
        logger.info("Reached the limit of %d colors", limit)
    return registries
