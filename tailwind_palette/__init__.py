"""Generate Tailwind CSS color tokens and CSS custom properties."""

__version__ = "0.1.0"
