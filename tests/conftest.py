"""Pytest fixtures for texture_dims tests."""
from __future__ import annotations

from typing import List, Tuple

import pytest

from texture_dims import Config
from texture_dims.config import ASPECT_NONE, StepMode


@pytest.fixture
def power_of_two_aspects() -> List[Tuple[int, int]]:
    """Simplified aspect pairs whose components are both powers of two."""
    return [(1, 1), (2, 1), (1, 2), (1, 4), (8, 1)]


@pytest.fixture
def coprime_aspects() -> List[Tuple[int, int]]:
    """Simplified aspect pairs from the presets plus a few awkward ones."""
    return [(1, 1), (2, 3), (3, 2), (4, 3), (16, 9), (47, 20), (5, 7)]


@pytest.fixture
def default_config() -> Config:
    """Return a default Config instance (111 wide, 2:3, divisible by 4)."""
    return Config()


@pytest.fixture
def independent_config() -> Config:
    """Return a Config with no aspect ratio and empty inputs."""
    return Config(input_width="", input_height="", aspect_ratio=ASPECT_NONE)


@pytest.fixture
def power_of_two_config() -> Config:
    """Return a Config using power-of-two stepping with a 2:1 aspect."""
    return Config(
        input_width="100",
        aspect_ratio="2:1",
        step_mode=StepMode.POWER_OF_2,
    )
