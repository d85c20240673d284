"""Command-line interface for the texture dimension calculator."""
from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence

from .calculator import CalculationResult, calculate
from .config import (
    ASPECT_CUSTOM,
    Config,
    DrivingAxis,
    RoundingMode,
    StepMode,
    TextureDimsError,
)
from .placeholder import (
    render_placeholder,
    save_placeholder,
    validate_texture_dimensions,
)
from .presets import ASPECT_RATIO_PRESETS, find_preset, split_aspect_value

logger = logging.getLogger("texture_dims")

MISSING_DIMENSION = "---"


def process_result(config: Config, result: CalculationResult) -> None:
    """Write and/or preview a placeholder texture for a calculated result.

    Args:
        config: Configuration with output path and preview flag.
        result: Successful calculation result.

    Raises:
        TextureDimsError: If the result cannot be rendered.
    """
    if not config.output_path and not config.preview:
        return
    width, height = result.calculated_width, result.calculated_height
    logger.debug(f"Rendering {width}x{height} placeholder (cell={config.cell_size})")
    if config.output_path:
        save_placeholder(config.output_path, width, height, config.cell_size)
        print(f"Saved to: {config.output_path}")
    if config.preview:
        img = render_placeholder(width, height, config.cell_size)
        img.show(title=f"Texture {width}x{height}")


def format_result(result: CalculationResult) -> str:
    """Format calculated dimensions as ``W x H``, marking absent axes."""
    width = MISSING_DIMENSION if result.calculated_width is None else result.calculated_width
    height = MISSING_DIMENSION if result.calculated_height is None else result.calculated_height
    return f"{width} x {height}"


def format_presets() -> str:
    """Return the aspect ratio presets as an aligned listing."""
    lines = [f"{preset.value:>8}  {preset.name}" for preset in ASPECT_RATIO_PRESETS]
    return "\n".join(lines)


def _apply_aspect(config: Config, value: str) -> None:
    """Set the aspect selector, treating unknown ``W:H`` values as custom."""
    if find_preset(value) is not None:
        config.aspect_ratio = value
        return
    config.aspect_ratio = ASPECT_CUSTOM
    config.custom_aspect_width, config.custom_aspect_height = split_aspect_value(value)


def parse_args(argv: Sequence[str]) -> Config:
    """Parse command-line arguments.

    Args:
        argv: Command-line arguments (including program name).

    Returns:
        Configured Config instance.

    Raises:
        TextureDimsError: If arguments are invalid.
    """
    args = list(argv[1:])
    config = Config(input_width="")
    debug = False
    drive: Optional[DrivingAxis] = None
    last_axis: Optional[DrivingAxis] = None
    positional: List[str] = []

    def take_value(i: int) -> str:
        if i + 1 >= len(args):
            raise TextureDimsError(_usage_message())
        return args[i + 1]

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--width":
            config.input_width = take_value(i)
            last_axis = DrivingAxis.WIDTH
            i += 2
        elif arg == "--height":
            config.input_height = take_value(i)
            last_axis = DrivingAxis.HEIGHT
            i += 2
        elif arg == "--aspect":
            _apply_aspect(config, take_value(i).strip().lower())
            i += 2
        elif arg == "--custom-aspect":
            config.aspect_ratio = ASPECT_CUSTOM
            config.custom_aspect_width, config.custom_aspect_height = split_aspect_value(
                take_value(i)
            )
            i += 2
        elif arg == "--step":
            config.step_value = take_value(i)
            i += 2
        elif arg == "--power-of-two":
            config.step_mode = StepMode.POWER_OF_2
            i += 1
        elif arg == "--rounding":
            value = take_value(i).lower()
            try:
                config.rounding_mode = RoundingMode(value)
            except ValueError:
                raise TextureDimsError("rounding must be 'nearest', 'down' or 'up'")
            i += 2
        elif arg == "--drive":
            value = take_value(i).lower()
            try:
                drive = DrivingAxis(value)
            except ValueError:
                raise TextureDimsError("drive must be 'width' or 'height'")
            i += 2
        elif arg == "--output":
            config.output_path = take_value(i)
            i += 2
        elif arg == "--cell-size":
            value = take_value(i)
            try:
                config.cell_size = int(value)
            except ValueError:
                raise TextureDimsError(f"Invalid cell-size value: '{value}'")
            if config.cell_size <= 0:
                raise TextureDimsError("cell-size must be a positive integer")
            i += 2
        elif arg == "--preview":
            config.preview = True
            i += 1
        elif arg == "--list-aspects":
            config.list_aspects = True
            i += 1
        elif arg == "--debug":
            debug = True
            i += 1
        else:
            positional.append(arg)
            i += 1

    if positional:
        raise TextureDimsError(_usage_message())

    # The axis given last plays the role of the most recently edited field
    if drive is not None:
        config.driving_input = drive
    elif last_axis is not None:
        config.driving_input = last_axis

    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s"
        )
        logging.getLogger("texture_dims").setLevel(logging.DEBUG)

    return config


def _usage_message() -> str:
    """Return usage message string."""
    return (
        "Usage: texture-calc [--width W] [--height H] [--aspect W:H|none|custom] "
        "[--custom-aspect W:H] [--step N | --power-of-two] "
        "[--rounding nearest|down|up] [--drive width|height] "
        "[--output PATH] [--cell-size N] [--preview] [--list-aspects] [--debug]"
    )


def main(argv: Sequence[str]) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    try:
        config = parse_args(argv)
        if config.list_aspects:
            print(format_presets())
            return 0

        result = calculate(config)
        if not result.error and (config.output_path or config.preview):
            # Rendering needs both axes
            validate_texture_dimensions(result.calculated_width, result.calculated_height)
        if result.error:
            print(f"Error: {result.error}", file=sys.stderr)
        if result.has_dimensions:
            print(format_result(result))
        if result.error:
            return 1

        process_result(config, result)
        return 0
    except TextureDimsError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"Processing error: {exc}", file=sys.stderr)
        return 1


def console_main() -> int:
    """Entry point for the installed ``texture-calc`` script."""
    return main(sys.argv)
