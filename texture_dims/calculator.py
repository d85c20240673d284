"""Calculation entry point tying input validation to the solvers."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .config import ASPECT_CUSTOM, Config, DrivingAxis, StepMode
from .params import (
    INVALID_STEP_MESSAGE,
    ErrorKind,
    ParameterError,
    normalize_parameters,
    parse_int,
)
from .presets import split_aspect_value
from .solver import solve_single_dimension, solve_with_aspect

logger = logging.getLogger("texture_dims")

NO_INPUT_MESSAGE = "Please enter at least one dimension."
CALCULATION_FAILED_MESSAGE = "Calculation failed. Check parameters."


@dataclass
class CalculationResult:
    """Outcome of a calculation.

    A dimension is None when nothing was entered (or computed) for that
    axis. An error may accompany partially computed dimensions.
    """

    calculated_width: Optional[int] = None
    calculated_height: Optional[int] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = field(default=None, compare=False)

    @property
    def has_dimensions(self) -> bool:
        return self.calculated_width is not None or self.calculated_height is not None


def resolve_driving_axis(
    width_text: str, height_text: str, preferred: DrivingAxis
) -> Optional[DrivingAxis]:
    """Pick the axis that drives an aspect-coupled calculation.

    The preferred axis wins when it has input, otherwise the other axis
    is used if it has input. Returns None when both are empty.
    """
    texts = {DrivingAxis.WIDTH: width_text.strip(), DrivingAxis.HEIGHT: height_text.strip()}
    if texts[preferred]:
        return preferred
    if texts[preferred.other]:
        return preferred.other
    return None


def calculate(config: Config) -> CalculationResult:
    """Compute admissible dimensions for the inputs held in config.

    Args:
        config: Raw calculator inputs.

    Returns:
        CalculationResult with dimensions and/or an error message.
    """
    if not config.aspect_active:
        return _calculate_independent(config)
    return _calculate_with_aspect(config)


def _calculate_independent(config: Config) -> CalculationResult:
    """Solve width and height separately with no aspect coupling."""
    width_text = config.input_width.strip()
    height_text = config.input_height.strip()
    if not width_text and not height_text:
        return CalculationResult(
            error=NO_INPUT_MESSAGE, error_kind=ErrorKind.NO_INPUT_PROVIDED
        )

    errors: List[str] = []
    # Reason behind the first message in errors
    error_kind: Optional[ErrorKind] = None
    step: Optional[int] = None
    step_valid = True
    if config.step_mode == StepMode.DIVISIBLE_BY:
        step = parse_int(config.step_value)
        if step is None or step <= 0:
            errors.append(INVALID_STEP_MESSAGE)
            error_kind = ErrorKind.INVALID_STEP
            step_valid = False

    solved: Dict[DrivingAxis, int] = {}
    for axis, text in ((DrivingAxis.WIDTH, width_text), (DrivingAxis.HEIGHT, height_text)):
        if not text:
            continue
        value = parse_int(text)
        if value is None or value < 0:
            errors.append(f"Input {axis.value} must be a non-negative integer.")
            error_kind = error_kind or ErrorKind.INVALID_DIMENSION
        elif step_valid:
            solved[axis] = solve_single_dimension(
                value, config.step_mode, config.rounding_mode, step
            )

    logger.debug(
        f"Independent axes: width={solved.get(DrivingAxis.WIDTH)}, "
        f"height={solved.get(DrivingAxis.HEIGHT)}, errors={len(errors)}"
    )
    return CalculationResult(
        calculated_width=solved.get(DrivingAxis.WIDTH),
        calculated_height=solved.get(DrivingAxis.HEIGHT),
        error=" ".join(errors) if errors else None,
        error_kind=error_kind,
    )


def _calculate_with_aspect(config: Config) -> CalculationResult:
    """Solve both dimensions from the driving axis and the aspect ratio."""
    if config.aspect_ratio == ASPECT_CUSTOM:
        aspect_w, aspect_h = config.custom_aspect_width, config.custom_aspect_height
    else:
        aspect_w, aspect_h = split_aspect_value(config.aspect_ratio)

    axis = resolve_driving_axis(
        config.input_width, config.input_height, config.driving_input
    )
    if axis is None:
        return CalculationResult(
            error=NO_INPUT_MESSAGE, error_kind=ErrorKind.NO_INPUT_PROVIDED
        )
    if axis is not config.driving_input:
        logger.debug(f"Driving axis {config.driving_input.value} is empty, using {axis.value}")

    driving_text = config.input_width if axis is DrivingAxis.WIDTH else config.input_height
    params = normalize_parameters(
        driving_text,
        aspect_w,
        aspect_h,
        config.step_mode,
        config.step_value if config.step_mode == StepMode.DIVISIBLE_BY else None,
    )
    if isinstance(params, ParameterError):
        logger.debug(f"Rejected parameters: {params.kind.value}")
        return CalculationResult(error=params.message, error_kind=params.kind)

    dimensions = solve_with_aspect(
        params.input_value,
        axis is DrivingAxis.WIDTH,
        params.aspect_width,
        params.aspect_height,
        config.step_mode,
        config.rounding_mode,
        params.step,
    )
    if dimensions is None:
        return CalculationResult(error=CALCULATION_FAILED_MESSAGE)

    logger.debug(
        f"Aspect {params.aspect_width}:{params.aspect_height} driven by {axis.value}="
        f"{params.input_value} -> {dimensions.width}x{dimensions.height}"
    )
    return CalculationResult(
        calculated_width=dimensions.width,
        calculated_height=dimensions.height,
    )
