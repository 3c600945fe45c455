"""Configuration management for tailwind-palette."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tailwind_palette.collector import MAX_COLORS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "tailwind.config.js"
DEFAULT_STYLESHEET_FILE = "colors.css"


class GeneratorConfig(BaseModel):
    """Where and how much to generate."""

    output_dir: Path = Field(default=Path("."), description="Directory the files are written into")
    config_file: str = Field(default=DEFAULT_CONFIG_FILE, description="Tailwind configuration filename")
    stylesheet_file: str = Field(default=DEFAULT_STYLESHEET_FILE, description="CSS variables filename")
    max_colors: int = Field(
        default=MAX_COLORS,
        ge=1,
        le=MAX_COLORS,
        description="Maximum number of colors asked for",
    )


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TAILWIND_PALETTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    output_dir: Path = Field(default=Path("."))
    config_file: str = Field(default=DEFAULT_CONFIG_FILE)
    stylesheet_file: str = Field(default=DEFAULT_STYLESHEET_FILE)
    max_colors: int = Field(default=MAX_COLORS)

    def to_generator_config(self) -> GeneratorConfig:
        """Convert settings to generator configuration."""
        return GeneratorConfig(
            output_dir=self.output_dir,
            config_file=self.config_file,
            stylesheet_file=self.stylesheet_file,
            max_colors=self.max_colors,
        )


def load_config_from_env() -> GeneratorConfig:
    """Load generator configuration from environment variables and ``.env``."""
    settings = Settings()
    logger.debug(f"Output directory: {settings.output_dir}")
    logger.debug(f"Output files: {settings.config_file}, {settings.stylesheet_file}")
    return settings.to_generator_config()
