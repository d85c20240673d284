"""Parsing and validation of raw calculator input."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .config import StepMode
from .numtheory import gcd, is_power_of_two

logger = logging.getLogger("texture_dims")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

INVALID_DIMENSION_MESSAGE = "Input dimension must be a non-negative integer."
INVALID_ASPECT_MESSAGE = "Aspect ratio components must be positive integers."
INVALID_STEP_MESSAGE = "Step value must be a positive integer."


class ErrorKind(str, Enum):
    """Reason a set of raw parameters was rejected."""

    INVALID_DIMENSION = "invalid_dimension"
    INVALID_ASPECT_RATIO = "invalid_aspect_ratio"
    INVALID_STEP = "invalid_step"
    INCOMPATIBLE_ASPECT_FOR_POWER_OF_TWO = "incompatible_aspect_for_power_of_two"
    NO_INPUT_PROVIDED = "no_input_provided"


@dataclass(frozen=True)
class ParameterError:
    """A rejected parameter set with a user-facing message."""

    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class NormalizedParams:
    """Validated numeric parameters with a simplified aspect ratio."""

    input_value: int
    aspect_width: int
    aspect_height: int
    step: Optional[int] = None


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse the leading integer of a string.

    Surrounding whitespace and a sign are accepted and digits are ASCII
    only. Anything after the leading digits is ignored, so ``"12px"`` and
    ``"12.9"`` both give 12. Returns None when the string does not start
    with an integer.
    """
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def incompatible_aspect_message(aspect_w: int, aspect_h: int) -> str:
    return (
        "For Power of 2 stepping with a fixed aspect ratio, both simplified "
        f"aspect ratio components (currently {aspect_w}:{aspect_h}) must "
        "themselves be powers of two. Consider 'None' aspect ratio for "
        "independent Power of 2 dimensions."
    )


def normalize_parameters(
    driving: str,
    aspect_w: Optional[str],
    aspect_h: Optional[str],
    step_mode: StepMode,
    step: Optional[str] = None,
) -> Union[NormalizedParams, ParameterError]:
    """Validate raw input and simplify the aspect ratio.

    Checks run in order and the first failure is returned:
    driving dimension, aspect components, step value, then power-of-two
    compatibility of the simplified aspect ratio.

    Args:
        driving: Text of the dimension that drives the calculation.
        aspect_w: Text of the aspect width component, or None when no
            aspect ratio is active.
        aspect_h: Text of the aspect height component, or None when no
            aspect ratio is active.
        step_mode: Active quantization constraint.
        step: Step text for DIVISIBLE_BY. Empty or None means 1.

    Returns:
        NormalizedParams on success, otherwise a ParameterError.
    """
    input_value = parse_int(driving)
    if input_value is None or input_value < 0:
        return ParameterError(ErrorKind.INVALID_DIMENSION, INVALID_DIMENSION_MESSAGE)

    aspect_active = aspect_w is not None or aspect_h is not None
    if aspect_active:
        num_w = parse_int(aspect_w)
        num_h = parse_int(aspect_h)
        if num_w is None or num_w <= 0 or num_h is None or num_h <= 0:
            return ParameterError(ErrorKind.INVALID_ASPECT_RATIO, INVALID_ASPECT_MESSAGE)
        divisor = gcd(num_w, num_h)
        simple_w, simple_h = num_w // divisor, num_h // divisor
    else:
        simple_w, simple_h = 1, 1

    if step_mode == StepMode.DIVISIBLE_BY:
        step_value = parse_int(step or "1")
        if step_value is None or step_value <= 0:
            return ParameterError(ErrorKind.INVALID_STEP, INVALID_STEP_MESSAGE)
        return NormalizedParams(input_value, simple_w, simple_h, step_value)

    if aspect_active and not (is_power_of_two(simple_w) and is_power_of_two(simple_h)):
        logger.debug(f"Aspect {simple_w}:{simple_h} rejected for power-of-two stepping")
        return ParameterError(
            ErrorKind.INCOMPATIBLE_ASPECT_FOR_POWER_OF_TWO,
            incompatible_aspect_message(simple_w, simple_h),
        )
    return NormalizedParams(input_value, simple_w, simple_h)
