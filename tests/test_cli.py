"""Tests for cli module."""
from __future__ import annotations

import pytest
from PIL import Image

from texture_dims.calculator import CalculationResult
from texture_dims.cli import format_result, main, parse_args
from texture_dims.config import DrivingAxis, RoundingMode, StepMode, TextureDimsError


class TestParseArgs:
    """Tests for parse_args function."""

    def test_width_only(self) -> None:
        """Should parse a width and keep the other defaults."""
        config = parse_args(["prog", "--width", "111"])
        assert config.input_width == "111"
        assert config.input_height == ""
        assert config.aspect_ratio == "2:3"
        assert config.step_value == "4"
        assert config.driving_input is DrivingAxis.WIDTH

    def test_no_dimensions(self) -> None:
        """Width should not be pre-filled on the command line."""
        config = parse_args(["prog"])
        assert config.input_width == ""

    def test_height_only_drives(self) -> None:
        """A lone height should drive the calculation."""
        config = parse_args(["prog", "--height", "150"])
        assert config.driving_input is DrivingAxis.HEIGHT

    def test_last_axis_drives(self) -> None:
        """The axis given last should drive."""
        config = parse_args(["prog", "--height", "150", "--width", "111"])
        assert config.driving_input is DrivingAxis.WIDTH
        config = parse_args(["prog", "--width", "111", "--height", "150"])
        assert config.driving_input is DrivingAxis.HEIGHT

    def test_drive_overrides(self) -> None:
        """--drive should win over argument order."""
        config = parse_args([
            "prog", "--drive", "width", "--width", "111", "--height", "150"
        ])
        assert config.driving_input is DrivingAxis.WIDTH

    def test_preset_aspect(self) -> None:
        """Known values should select the preset."""
        assert parse_args(["prog", "--aspect", "16:9"]).aspect_ratio == "16:9"
        assert parse_args(["prog", "--aspect", "None"]).aspect_ratio == "none"

    def test_unknown_aspect_is_custom(self) -> None:
        """Unknown W:H values should become a custom aspect."""
        config = parse_args(["prog", "--aspect", "5:7"])
        assert config.aspect_ratio == "custom"
        assert (config.custom_aspect_width, config.custom_aspect_height) == ("5", "7")

    def test_custom_aspect(self) -> None:
        """Should parse --custom-aspect."""
        config = parse_args(["prog", "--custom-aspect", "21:9"])
        assert config.aspect_ratio == "custom"
        assert (config.custom_aspect_width, config.custom_aspect_height) == ("21", "9")

    def test_step_options(self) -> None:
        """Should parse --step and --power-of-two."""
        assert parse_args(["prog", "--step", "16"]).step_value == "16"
        assert parse_args(["prog", "--power-of-two"]).step_mode is StepMode.POWER_OF_2

    def test_rounding(self) -> None:
        """Should parse --rounding case-insensitively."""
        assert parse_args(["prog", "--rounding", "UP"]).rounding_mode is RoundingMode.UP

    def test_invalid_rounding(self) -> None:
        """Should reject unknown rounding modes."""
        with pytest.raises(TextureDimsError, match="rounding must be"):
            parse_args(["prog", "--rounding", "sideways"])

    def test_invalid_drive(self) -> None:
        """Should reject unknown driving axes."""
        with pytest.raises(TextureDimsError, match="drive must be"):
            parse_args(["prog", "--drive", "depth"])

    def test_output_options(self) -> None:
        """Should parse output, cell size and preview."""
        config = parse_args([
            "prog", "--output", "out.png", "--cell-size", "16", "--preview"
        ])
        assert config.output_path == "out.png"
        assert config.cell_size == 16
        assert config.preview is True

    def test_invalid_cell_size(self) -> None:
        """Should reject unparseable or non-positive cell sizes."""
        with pytest.raises(TextureDimsError, match="Invalid cell-size"):
            parse_args(["prog", "--cell-size", "abc"])
        with pytest.raises(TextureDimsError, match="positive integer"):
            parse_args(["prog", "--cell-size", "0"])

    def test_missing_value(self) -> None:
        """Should require a value after options that take one."""
        with pytest.raises(TextureDimsError, match="Usage"):
            parse_args(["prog", "--width"])

    def test_positional_rejected(self) -> None:
        """Should reject positional arguments."""
        with pytest.raises(TextureDimsError, match="Usage"):
            parse_args(["prog", "111"])


class TestFormatResult:
    """Tests for format_result function."""

    def test_both_dimensions(self) -> None:
        """Should join dimensions with an x."""
        assert format_result(CalculationResult(112, 168)) == "112 x 168"

    def test_missing_dimension(self) -> None:
        """Absent axes should be shown as dashes."""
        assert format_result(CalculationResult(112, None)) == "112 x ---"
        assert format_result(CalculationResult(None, 64)) == "--- x 64"


class TestMain:
    """Tests for main function."""

    def test_aspect_calculation(self, capsys) -> None:
        """Should print the calculated dimensions."""
        assert main(["prog", "--width", "111"]) == 0
        assert capsys.readouterr().out.strip() == "112 x 168"

    def test_independent_calculation(self, capsys) -> None:
        """Should show dashes for an axis that was not entered."""
        assert main(["prog", "--aspect", "none", "--width", "111"]) == 0
        assert capsys.readouterr().out.strip() == "112 x ---"

    def test_no_input(self, capsys) -> None:
        """Should report missing input and fail."""
        assert main(["prog"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Please enter at least one dimension." in captured.err

    def test_partial_result_with_error(self, capsys) -> None:
        """Should print partial dimensions alongside the error."""
        code = main(["prog", "--aspect", "none", "--width", "-3", "--height", "100"])
        captured = capsys.readouterr()
        assert code == 1
        assert captured.out.strip() == "--- x 100"
        assert "Input width must be a non-negative integer." in captured.err

    def test_list_aspects(self, capsys) -> None:
        """Should list the presets."""
        assert main(["prog", "--list-aspects"]) == 0
        out = capsys.readouterr().out
        assert "Widescreen (16:9)" in out
        assert "None (Independent W/H)" in out

    def test_output_file(self, tmp_path, capsys) -> None:
        """Should write a placeholder texture of the calculated size."""
        path = tmp_path / "out.png"
        assert main(["prog", "--width", "111", "--output", str(path)]) == 0
        assert "Saved to:" in capsys.readouterr().out
        with Image.open(path) as img:
            assert img.size == (112, 168)

    def test_output_needs_both_axes(self, tmp_path, capsys) -> None:
        """Should fail without printing a result when an axis is absent."""
        path = tmp_path / "out.png"
        code = main([
            "prog", "--aspect", "none", "--width", "111", "--output", str(path)
        ])
        captured = capsys.readouterr()
        assert code == 1
        assert "Both width and height" in captured.err
        assert captured.out == ""
        assert not path.exists()

    def test_preview_needs_both_axes(self, capsys) -> None:
        """Preview should be refused the same way when an axis is absent."""
        code = main(["prog", "--aspect", "none", "--height", "100", "--preview"])
        captured = capsys.readouterr()
        assert code == 1
        assert captured.out == ""
        assert "Both width and height" in captured.err

    def test_usage_error(self, capsys) -> None:
        """Should print usage for bad arguments."""
        assert main(["prog", "extra"]) == 1
        assert "Usage" in capsys.readouterr().err
