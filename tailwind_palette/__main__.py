"""Entry point for ``python -m tailwind_palette``."""

from tailwind_palette.cli import main

if __name__ == "__main__":
    main()
