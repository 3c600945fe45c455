"""Setup script for tailwind-palette."""

from setuptools import setup, find_packages

setup(
    name="tailwind-palette",
    version="0.1.0",
    packages=find_packages(include=["tailwind_palette", "tailwind_palette.*"]),
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
        "typer>=0.12.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tailwind-palette=tailwind_palette.cli:main",
        ],
    },
    python_requires=">=3.10",
)
