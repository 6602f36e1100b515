"""Activation functions for quantized tensors."""

from __future__ import annotations

from collections.abc import Iterable


def relu6(values: Iterable[int]) -> list[int]:
    """Clamp every value to the range [0, 6]."""
    return [min(max(int(value), 0), 6) for value in values]