"""Configuration and shared types for texture dimension calculation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TextureDimsError(Exception):
    """Base exception for texture_dims errors."""

    pass


class StepMode(str, Enum):
    """Quantization constraint applied to every output dimension."""

    DIVISIBLE_BY = "divisible"
    POWER_OF_2 = "powerOf2"


class RoundingMode(str, Enum):
    """Which admissible neighbour to pick when the input is in between."""

    NEAREST = "nearest"
    DOWN = "down"
    UP = "up"


class DrivingAxis(str, Enum):
    """Axis whose value anchors an aspect-coupled calculation."""

    WIDTH = "width"
    HEIGHT = "height"

    @property
    def other(self) -> "DrivingAxis":
        return DrivingAxis.HEIGHT if self is DrivingAxis.WIDTH else DrivingAxis.WIDTH


# Aspect ratio selector values with special meaning
ASPECT_NONE = "none"
ASPECT_CUSTOM = "custom"


@dataclass
class Config:
    """Raw calculator inputs plus command-line options.

    Dimension, aspect and step fields hold the text exactly as entered;
    validation happens in the calculator on every run.
    """

    input_width: str = "111"
    input_height: str = ""
    aspect_ratio: str = "2:3"
    custom_aspect_width: str = "1"
    custom_aspect_height: str = "1"
    step_mode: StepMode = StepMode.DIVISIBLE_BY
    step_value: str = "4"
    driving_input: DrivingAxis = DrivingAxis.WIDTH
    rounding_mode: RoundingMode = RoundingMode.NEAREST

    # Placeholder texture output
    output_path: Optional[str] = None
    preview: bool = False
    cell_size: int = 8

    list_aspects: bool = False

    @property
    def aspect_active(self) -> bool:
        return self.aspect_ratio != ASPECT_NONE
