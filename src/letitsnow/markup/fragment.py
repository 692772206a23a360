from __future__ import annotations

import numpy as np

from letitsnow.motion.trajectory import Position

SNOWFLAKE_ELEMENT_ID = "snowflake"
SNOWFLAKE_IMAGE_URL = (
    "https://www.pngall.com/wp-content/uploads/13/Snowflake-PNG-Image-File.png"
)
SIZING_CLASSES = "absolute w-full h-full"


def format_pixels(value: float) -> str:
    """Render ``value`` as the shortest positional decimal that round-trips.

    Class names such as ``left-[12.5px]`` cannot carry exponent notation, so
    tiny sine residues are spelled out in full rather than as ``1e-14``.
    """

    return np.format_float_positional(float(value), trim="-")


def build_fragment(position: Position) -> str:
    top_class = f"top-[{format_pixels(position.top)}px]"
    left_class = f"left-[{format_pixels(position.left)}px]"
    return (
        f'<img id="{SNOWFLAKE_ELEMENT_ID}" '
        f'class="{top_class} {left_class} {SIZING_CLASSES}" '
        f'src="{SNOWFLAKE_IMAGE_URL}"></img>'
    )
