"""Tests for the CLI module."""

import re
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tailwind_palette.cli import (
    TAILWIND_PALETTE_VERSION,
    app,
    build_artifacts,
    generate,
    setup_logging,
)
from tailwind_palette.collector import ColorEntry, ColorRegistries
from tailwind_palette.config import GeneratorConfig

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every command from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    for name in ["OUTPUT_DIR", "CONFIG_FILE", "STYLESHEET_FILE", "MAX_COLORS"]:
        monkeypatch.delenv(f"TAILWIND_PALETTE_{name}", raising=False)


def _plain(text):
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


def test_setup_logging():
    """Test that setup_logging works correctly."""
    setup_logging(verbose=False)
    setup_logging(verbose=True)


def test_version_command():
    """Test the version command output."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert TAILWIND_PALETTE_VERSION in result.stdout


def test_help_command():
    """Test that help works."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0

    output = _plain(result.stdout)
    assert "--output-dir" in output
    assert "--max-colors" in output


def test_shades_command():
    """Test previewing the shades of a color."""
    result = runner.invoke(app, ["shades", "3366FF"])
    assert result.exit_code == 0

    output = _plain(result.stdout)
    assert "#3366ff" in output
    assert "51 102 255" in output
    assert "950" in output


def test_shades_command_invalid_color():
    """Test that an invalid color exits with an error."""
    result = runner.invoke(app, ["shades", "xyz"])
    assert result.exit_code == 1
    assert "Invalid hex color" in _plain(result.stdout)


def test_interactive_run_writes_both_files(tmp_path):
    """Test a full interactive session with two colors."""
    answers = "primary\n3366FF\ny\naccent\nf00\nn\n"
    result = runner.invoke(app, ["--output-dir", str(tmp_path)], input=answers)

    assert result.exit_code == 0, result.stdout
    stylesheet = (tmp_path / "colors.css").read_text()
    config = (tmp_path / "tailwind.config.js").read_text()

    assert stylesheet.startswith(":root {\n")
    assert "--color-primary-500: 51 102 255;" in stylesheet
    assert "--color-accent-500: 255 0 0;" in stylesheet
    assert config.startswith("module.exports = {")
    assert "DEFAULT: 'rgb(var(--color-accent-500) / <alpha-value>)'" in config
    assert "50: 'rgb(var(--color-primary-50) / <alpha-value>)'" in config
    assert "successfully saved" in _plain(result.stdout)


def test_default_output_files(tmp_path):
    """Test that the fixed filenames are used in the current directory."""
    result = runner.invoke(app, [], input="brand\nabcdef\nn\n")

    assert result.exit_code == 0, result.stdout
    assert (tmp_path / "tailwind.config.js").exists()
    assert (tmp_path / "colors.css").exists()


def test_invalid_max_colors():
    """Test that an out-of-range limit is rejected before prompting."""
    result = runner.invoke(app, ["--max-colors", "9"])
    assert result.exit_code == 1
    assert "Invalid configuration" in _plain(result.stdout)


def test_interrupt_exits_cleanly():
    """Test that Ctrl+C at a prompt exits without an error code."""
    with patch("tailwind_palette.cli.generate", side_effect=KeyboardInterrupt):
        result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "Interrupted" in result.stdout


def test_write_failure_keeps_exit_code(tmp_path):
    """Test that a failed write is reported without failing the run."""
    (tmp_path / "colors.css").mkdir()
    result = runner.invoke(app, [], input="brand\nabcdef\nn\n")

    assert result.exit_code == 0
    assert (tmp_path / "tailwind.config.js").exists()
    assert "Error saving CSS variables" in _plain(result.stdout)


def test_generate_with_scripted_colors(tmp_path):
    """Test generate() with a non-interactive color source."""
    answers = iter([(ColorEntry("primary", "3366FF"), False)])
    config = GeneratorConfig(output_dir=tmp_path, stylesheet_file="tokens.css")

    results = generate(config, ask=lambda: next(answers))

    assert [result.ok for result in results] == [True, True]
    assert "--color-primary-500: 51 102 255;" in (tmp_path / "tokens.css").read_text()


def test_build_artifacts():
    """Test that artifacts follow the configured filenames."""
    registries = ColorRegistries()
    registries.add("primary", {"500": "#3366ff"})
    config = GeneratorConfig(config_file="a.js", stylesheet_file="b.css")

    config_artifact, stylesheet_artifact = build_artifacts(registries, config)

    assert config_artifact.filename == "a.js"
    assert stylesheet_artifact.filename == "b.css"
    assert "--color-primary-500: 51 102 255;" in stylesheet_artifact.content


def test_shades_command_bracketed_argument():
    """Test that an argument that looks like markup is reported, not parsed."""
    result = runner.invoke(app, ["shades", "[/x]"])
    assert result.exit_code == 1
    assert "Invalid hex color: '[/x]'" in _plain(result.stdout)


def test_invalid_max_colors_shows_rejected_value():
    """Test that the validation details are printed in full."""
    result = runner.invoke(app, ["--max-colors", "9"])
    assert result.exit_code == 1
    assert "input_value=9" in _plain(result.stdout)


def test_output_dir_with_brackets(tmp_path):
    """Test reporting results for an output directory containing brackets."""
    output_dir = tmp_path / "out[/b]"
    output_dir.mkdir(parents=True)

    result = runner.invoke(app, ["--output-dir", str(output_dir)], input="brand\nabcdef\nn\n")

    assert result.exit_code == 0, result.stdout
    assert (output_dir / "colors.css").exists()
    assert _plain(result.stdout).count("successfully saved") == 2
