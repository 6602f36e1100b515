"""Conversion of camera frames into signed 8-bit model input."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _to_int8(value: int) -> int:
    value &= 0xFF
    return value - 256 if value >= 128 else value


def rgb565_to_gray(pixel: int) -> int:
    """Convert one byte-swapped RGB565 pixel to a grey level in [-128, 127]."""
    if not 0 <= pixel <= 0xFFFF:
        raise ValueError(f"pixel {pixel} is not a 16-bit value")
    high_byte = pixel & 0xFF
    low_byte = pixel >> 8
    red = ((low_byte & 0x1F) << 3) & 0xFF
    green = (((high_byte & 0x07) << 5) | ((low_byte & 0xE0) >> 3)) & 0xFF
    blue = high_byte & 0xF8
    return _to_int8(((305 * red + 600 * green + 119 * blue) >> 10) - 128)


def convert_rgb565_frame(
    pixels: Sequence[int], rows: int, cols: int
) -> tuple[list[int], list[int]]:
    """Turn an RGB565 frame into model input and a 2x upscaled display buffer.

    Returns ``(image_data, display_buffer)``: ``rows * cols`` grey levels, and
    ``(2 * rows) * (2 * cols)`` pixels where each source pixel fills a 2x2 block.
    """
    if rows < 0 or cols < 0:
        raise ValueError("rows and cols must not be negative")
    if len(pixels) < rows * cols:
        raise ValueError(f"frame holds {len(pixels)} pixels, need {rows * cols}")
    image_data: list[int] = []
    display: list[int] = []
    for row in range(rows):
        source_row = pixels[row * cols : (row + 1) * cols]
        image_data.extend(rgb565_to_gray(pixel) for pixel in source_row)
        doubled = [pixel for pixel in source_row for _ in range(2)]
        display.extend(doubled)
        display.extend(doubled)
    return image_data, display


def quantize_grayscale(frame: Iterable[int]) -> list[int]:
    """Map unsigned grey levels (0-255) to signed model input (-128-127)."""
    result = []
    for value in frame:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"grey level {value} is not an unsigned byte")
        result.append(_to_int8(value ^ 0x80))
    return result