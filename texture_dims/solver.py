"""Constrained dimension solvers.

Both solvers are pure and total: they never raise on numeric input and
return sentinel values for states the normalizer should have rejected.

The aspect-coupled solver writes every result as ``width = N * aspect_w``
and ``height = N * aspect_h`` for an integer multiplier N, so the
two-dimensional problem becomes a one-dimensional search for N. Both
solvers therefore share the same bound, guard and pick helpers; only the
quantity being bounded differs.
"""
from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import NamedTuple, Optional, Tuple, Union

from .config import RoundingMode, StepMode
from .numtheory import gcd, lcm

logger = logging.getLogger("texture_dims")

Number = Union[int, Fraction]


class Dimensions(NamedTuple):
    """Width and height produced by the aspect-coupled solver."""

    width: int
    height: int


def _multiple_bounds(target: Fraction, step: int) -> Tuple[Number, Number]:
    """Nearest multiples of step at or below and at or above target."""
    ratio = target / step
    return math.floor(ratio) * step, math.ceil(ratio) * step


def _power_of_two_bounds(target: Fraction) -> Tuple[Number, Number]:
    """Nearest powers of two at or below and at or above target.

    Target must be positive. Exponents may be negative for targets below 1;
    the guard lifts those. The exponent comes from exact bit lengths, not
    a float log2.
    """
    target = Fraction(target)
    # floor(log2 target) is either this estimate or one less
    exponent = target.numerator.bit_length() - target.denominator.bit_length()
    low = Fraction(2) ** exponent
    if low > target:
        low /= 2
    high = low if low == target else low * 2
    return low, high


def _guard_bounds(
    target: Number,
    low: Number,
    high: Number,
    smallest: int,
    allow_zero_low: bool,
) -> Tuple[Number, Number]:
    """Keep a positive target from resolving to a non-positive candidate set.

    The upper bound is raised to the smallest admissible positive value.
    The lower bound may stay at 0 for multiples (rounding down to nothing
    is allowed) but is raised to 1 for powers of two.
    """
    if target <= 0:
        return low, high
    if high < smallest:
        high = smallest
    if not allow_zero_low and low < smallest:
        low = smallest
    return low, high


def _pick(
    value: Number,
    low: Number,
    high: Number,
    rounding: RoundingMode,
    scale: int = 1,
) -> Number:
    """Pick a bound according to the rounding mode.

    For NEAREST the distances are measured between value and each bound
    multiplied by scale; ties go to the lower bound.
    """
    if low == high:
        return low
    if rounding == RoundingMode.DOWN:
        return low
    if rounding == RoundingMode.UP:
        return high
    dist_low = abs(value - low * scale)
    dist_high = abs(value - high * scale)
    return low if dist_low <= dist_high else high


def solve_single_dimension(
    value: int,
    step_mode: StepMode,
    rounding: RoundingMode,
    step: Optional[int] = None,
) -> int:
    """Snap one dimension to the admissible value selected by rounding.

    Args:
        value: Non-negative input dimension.
        step_mode: Constraint to satisfy.
        rounding: Which neighbour to choose when value is not admissible.
        step: Step for DIVISIBLE_BY. A missing or non-positive step makes
            the solver return the input unchanged.

    Returns:
        The admissible dimension, 0 for non-positive input.
    """
    if value <= 0:
        return 0

    target = Fraction(value)
    if step_mode == StepMode.DIVISIBLE_BY:
        if not step or step <= 0:
            return int(round(value))
        low, high = _multiple_bounds(target, step)
        low, high = _guard_bounds(target, low, high, step, allow_zero_low=True)
    else:
        low, high = _power_of_two_bounds(target)
        low, high = _guard_bounds(target, low, high, 1, allow_zero_low=False)

    return int(round(_pick(target, low, high, rounding)))


def solve_with_aspect(
    driving_value: int,
    driving_is_width: bool,
    aspect_w: int,
    aspect_h: int,
    step_mode: StepMode,
    rounding: RoundingMode,
    step: Optional[int] = None,
) -> Optional[Dimensions]:
    """Solve both dimensions from one driving value and an aspect ratio.

    The aspect components must already be simplified (coprime). For
    POWER_OF_2 they must also be powers of two, which makes N a power of
    two as well. For DIVISIBLE_BY, ``N * aspect_w`` is a multiple of step
    exactly when N is a multiple of ``step / gcd(aspect_w, step)``, and the
    same holds for height, so N steps by the lcm of the two terms.

    Args:
        driving_value: Value entered on the driving axis.
        driving_is_width: True when width drives the calculation.
        aspect_w: Simplified aspect width component.
        aspect_h: Simplified aspect height component.
        step_mode: Constraint to satisfy on both axes.
        rounding: Which multiplier to choose; NEAREST compares the
            candidates on the driving axis.
        step: Step for DIVISIBLE_BY.

    Returns:
        Dimensions, or None when the aspect ratio or step is unusable.
    """
    if driving_value < 0:
        return Dimensions(0, 0)
    if aspect_w <= 0 or aspect_h <= 0:
        return None

    axis_aspect = aspect_w if driving_is_width else aspect_h
    target_n = Fraction(driving_value, axis_aspect) if driving_value else Fraction(0)

    if step_mode == StepMode.DIVISIBLE_BY:
        if not step or step <= 0:
            return None
        n_step = lcm(step // gcd(aspect_w, step), step // gcd(aspect_h, step))
        if n_step == 0:
            # Only reachable through degenerate gcds; kept as an empty result.
            return Dimensions(0, 0)
        n_low, n_high = _multiple_bounds(target_n, n_step)
        n_low, n_high = _guard_bounds(
            driving_value, n_low, n_high, n_step, allow_zero_low=True
        )
    elif target_n <= 0:
        n_low, n_high = 0, 0
    else:
        n_low, n_high = _power_of_two_bounds(target_n)
        n_low, n_high = _guard_bounds(target_n, n_low, n_high, 1, allow_zero_low=False)

    chosen_n = _pick(driving_value, n_low, n_high, rounding, scale=axis_aspect)
    logger.debug(
        f"Multiplier bounds {n_low}..{n_high} for target {float(target_n):.3f}, "
        f"chose {chosen_n}"
    )
    return Dimensions(int(round(chosen_n * aspect_w)), int(round(chosen_n * aspect_h)))
