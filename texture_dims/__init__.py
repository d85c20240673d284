"""Texture Dims - Snap texture dimensions to GPU-friendly sizes.

This package computes width/height pairs that are multiples of a step
or powers of two, optionally locked to an aspect ratio.

Example:
    from texture_dims import Config, calculate

    config = Config(input_width="111", aspect_ratio="2:3", step_value="4")
    result = calculate(config)
    print(f"{result.calculated_width}x{result.calculated_height}")  # 112x168

The solvers can also be called directly:

    from texture_dims import RoundingMode, StepMode, solve_single_dimension

    solve_single_dimension(100, StepMode.POWER_OF_2, RoundingMode.DOWN)  # 64

For debug logging, enable with:

    import logging
    logging.getLogger("texture_dims").setLevel(logging.DEBUG)
    logging.basicConfig(level=logging.DEBUG)
"""
import logging

# Package logger - disabled by default, enable with logging.getLogger("texture_dims").setLevel(logging.DEBUG)
logger = logging.getLogger("texture_dims")
logger.addHandler(logging.NullHandler())
from .calculator import CalculationResult, calculate, resolve_driving_axis
from .cli import main
from .config import Config, DrivingAxis, RoundingMode, StepMode, TextureDimsError
from .numtheory import gcd, is_power_of_two, lcm
from .params import ErrorKind, NormalizedParams, ParameterError, normalize_parameters
from .placeholder import render_placeholder, save_placeholder
from .presets import ASPECT_RATIO_PRESETS, AspectRatioPreset
from .solver import Dimensions, solve_single_dimension, solve_with_aspect

__all__ = [
    "Config",
    "DrivingAxis",
    "RoundingMode",
    "StepMode",
    "TextureDimsError",
    "CalculationResult",
    "calculate",
    "resolve_driving_axis",
    "main",
    # Solver core
    "gcd",
    "lcm",
    "is_power_of_two",
    "ErrorKind",
    "NormalizedParams",
    "ParameterError",
    "normalize_parameters",
    "Dimensions",
    "solve_single_dimension",
    "solve_with_aspect",
    # Presets and placeholders
    "ASPECT_RATIO_PRESETS",
    "AspectRatioPreset",
    "render_placeholder",
    "save_placeholder",
]

__version__ = "1.0.0"
