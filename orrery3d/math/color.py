"""
Color helpers: 0xRRGGBB integers to float RGB triples.
"""

from typing import Tuple

RGB = Tuple[float, float, float]


def hex_to_rgb(value: int) -> RGB:
    if not 0 <= value <= 0xFFFFFF:
        raise ValueError(f"color out of range: {value:#x}")
    return (
        ((value >> 16) & 0xFF) / 255.0,
        ((value >> 8) & 0xFF) / 255.0,
        (value & 0xFF) / 255.0,
    )
