"""Tonal shade scale derivation.

Lighter shades (50-400) mix the base color toward white, darker shades
(600-950) scale it toward black, and 500 is the base color itself.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from tailwind_palette.colors import parse_hex, rgb_to_hex

# Any callable mapping a base hex color to {shade label: "#rrggbb"}
ShadeDeriver = Callable[[str], Mapping[str, str]]

BASE_SHADE = "500"

# Label -> mix intensity, in ascending label order
SHADE_INTENSITIES: dict[str, float] = {
    "50": 0.95,
    "100": 0.9,
    "200": 0.75,
    "300": 0.6,
    "400": 0.3,
    "500": 0.0,
    "600": 0.9,
    "700": 0.75,
    "800": 0.6,
    "900": 0.49,
    "950": 0.29,
}


def _round(value: float) -> int:
    # Half up, not Python's banker's rounding
    return int(value + 0.5)


def tint(rgb: tuple[int, int, int], intensity: float) -> tuple[int, int, int]:
    """Mix a color toward white."""
    r, g, b = (_round(c + (255 - c) * intensity) for c in rgb)
    return r, g, b


def shade(rgb: tuple[int, int, int], intensity: float) -> tuple[int, int, int]:
    """Scale a color toward black."""
    r, g, b = (_round(c * intensity) for c in rgb)
    return r, g, b


def derive_shades(
    base_hex: str,
    intensities: Mapping[str, float] = SHADE_INTENSITIES,
) -> dict[str, str]:
    """Derive the shade scale for a base color.

    Args:
        base_hex: Base color as 3 or 6 hex digits, with or without "#".
        intensities: Shade label to mix intensity. Labels below 500 are
            tinted, labels above 500 are shaded.

    Returns:
        Shade label to ``#rrggbb``, in the order of ``intensities``.
    """
    rgb = parse_hex(base_hex)
    shades: dict[str, str] = {}
    for label, intensity in intensities.items():
        step = int(label)
        if step < int(BASE_SHADE):
            shades[label] = rgb_to_hex(*tint(rgb, intensity))
        elif step > int(BASE_SHADE):
            shades[label] = rgb_to_hex(*shade(rgb, intensity))
        else:
            shades[label] = rgb_to_hex(*rgb)
    return shades
