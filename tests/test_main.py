"""Tests for the __main__ module."""


def test_main_module_calls_cli_main():
    """Test that __main__ module imports main from cli."""
    import tailwind_palette.__main__
    import tailwind_palette.cli

    assert tailwind_palette.__main__.main is tailwind_palette.cli.main
