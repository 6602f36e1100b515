"""Gesture-sequence lock: turns model outputs into servo decisions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from microsense.detection_responder import respond_to_detection
from microsense.settings import (
    ABIERTA_INDEX,
    CERRADO_INDEX,
    GESTURE_CATEGORY_COUNT,
    PULGAR_INDEX,
    ROCK_INDEX,
    TRES_DEDOS_INDEX,
    UN_DEDO_INDEX,
)

logger = logging.getLogger(__name__)

SERVO_MIN_PULSEWIDTH_US = 500
SERVO_MAX_PULSEWIDTH_US = 2500
SERVO_MAX_DEGREE = 180
SERVO_OPEN_ANGLE = 180

KEY_LENGTH = 4
DEFAULT_KEYS: tuple[tuple[int, ...], tuple[int, ...]] = ((5, 5, 5, 5), (0, 0, 0, 0))


def servo_duty_us(angle: float) -> int:
    """Pulse width in microseconds for a servo angle between -90 and 270 degrees."""
    duty = int(
        SERVO_MIN_PULSEWIDTH_US
        + ((angle + 90) / 360.0) * (SERVO_MAX_PULSEWIDTH_US - SERVO_MIN_PULSEWIDTH_US)
    )
    if duty < 0:
        raise ValueError(f"angle {angle} gives a negative pulse width")
    return duty


def top_class(scores: Sequence[int]) -> int:
    """Index of the highest score; the earliest index wins a tie."""
    if not scores:
        raise ValueError("no scores to choose from")
    best_index = 0
    best_score = scores[0]
    for index, score in enumerate(scores):
        if score > best_score:
            best_score = score
            best_index = index
    return best_index


def dequantize(value: int, zero_point: int, scale: float) -> float:
    """Convert a quantized value back to a real number."""
    return (value - zero_point) * scale


def matches_key(sequence: Sequence[int], key: Sequence[int]) -> bool:
    """Whether an entered gesture sequence equals a key, position by position."""
    return len(sequence) == len(key) and all(
        entered == expected for entered, expected in zip(sequence, key)
    )


def classify_output(output: Sequence[int], zero_point: int, scale: float) -> str:
    """Dequantize one model output and return the gesture code it reports.

    Output values are read as unsigned bytes, as the model's buffer is.
    """
    if len(output) < GESTURE_CATEGORY_COUNT:
        raise ValueError(
            f"output holds {len(output)} scores, need {GESTURE_CATEGORY_COUNT}"
        )

    def score(index: int) -> float:
        return dequantize(int(output[index]) & 0xFF, zero_point, scale)

    return respond_to_detection(
        score(UN_DEDO_INDEX),
        score(ROCK_INDEX),
        score(TRES_DEDOS_INDEX),
        score(PULGAR_INDEX),
        score(ABIERTA_INDEX),
        score(CERRADO_INDEX),
    )


class GestureLock:
    """Two-locker lock opened by entering the right sequence of gestures.

    ``keys[0]`` opens servo 2 when the locker state is 0; ``keys[1]`` opens
    servo 1 when the locker state is 1.
    """

    def __init__(self, keys: Sequence[Sequence[int]] = DEFAULT_KEYS) -> None:
        if len(keys) != 2:
            raise ValueError("a gesture lock needs exactly two keys")
        normalised = tuple(tuple(int(v) for v in key) for key in keys)
        for key in normalised:
            if len(key) != KEY_LENGTH:
                raise ValueError(f"each key must hold {KEY_LENGTH} gestures")
        self.keys = normalised

    def check(self, sequence: Sequence[int], locker_state: int) -> int | None:
        """Return the servo to open for ``sequence``, or None if it is wrong."""
        if locker_state == 1:
            matched = matches_key(sequence, self.keys[1])
            logger.info("Comparison with key 1: %s", "equal" if matched else "different")
            return 1 if matched else None
        matched = matches_key(sequence, self.keys[0])
        logger.info("Comparison with key 0: %s", "equal" if matched else "different")
        return 2 if matched else None