"""Script entry point for the texture dimension calculator.

For library use, import from the texture_dims package:

    from texture_dims import Config, calculate, main
"""
from __future__ import annotations

import sys

from texture_dims import main

if __name__ == "__main__":
    sys.exit(main(sys.argv))
