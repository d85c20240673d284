"""Aspect ratio presets offered by the calculator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import ASPECT_CUSTOM, ASPECT_NONE


@dataclass(frozen=True)
class AspectRatioPreset:
    """A named aspect ratio choice.

    ``value`` is either ``"W:H"`` or one of the special selectors
    ``"custom"`` and ``"none"``, which carry no components.
    """

    name: str
    value: str
    width: Optional[int] = None
    height: Optional[int] = None


ASPECT_RATIO_PRESETS: List[AspectRatioPreset] = [
    AspectRatioPreset("Square (1:1)", "1:1", 1, 1),
    AspectRatioPreset("Landscape (2:1)", "2:1", 2, 1),
    AspectRatioPreset("Portrait (1:2)", "1:2", 1, 2),
    AspectRatioPreset("Landscape (3:2)", "3:2", 3, 2),
    AspectRatioPreset("Portrait (2:3)", "2:3", 2, 3),
    AspectRatioPreset("Landscape (4:3)", "4:3", 4, 3),
    AspectRatioPreset("Portrait (3:4)", "3:4", 3, 4),
    AspectRatioPreset("Widescreen (16:9)", "16:9", 16, 9),
    AspectRatioPreset("Tallscreen (9:16)", "9:16", 9, 16),
    # 2.35:1 expressed with integer components
    AspectRatioPreset("Cinematic (2.35:1)", "235:100", 235, 100),
    AspectRatioPreset("Custom Aspect Ratio", ASPECT_CUSTOM),
    AspectRatioPreset("None (Independent W/H)", ASPECT_NONE),
]


def find_preset(value: str) -> Optional[AspectRatioPreset]:
    """Look up a preset by its selector value."""
    for preset in ASPECT_RATIO_PRESETS:
        if preset.value == value:
            return preset
    return None


def split_aspect_value(value: str) -> Tuple[str, str]:
    """Split a ``"W:H"`` selector value into its raw component strings.

    A value without a colon yields an empty height, which the
    normalizer later rejects as an invalid aspect ratio.
    """
    width, _, height = value.partition(":")
    return width, height
