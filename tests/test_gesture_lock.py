import pytest

from microsense.gesture_lock import (
    GestureLock,
    classify_output,
    dequantize,
    matches_key,
    servo_duty_us,
    top_class,
)
from microsense.settings import (
    ABIERTA_INDEX,
    CERRADO_INDEX,
    PULGAR_INDEX,
    ROCK_INDEX,
    TRES_DEDOS_INDEX,
    UN_DEDO_INDEX,
)


def test_servo_duty_limits():
    assert servo_duty_us(-90) == 500
    assert servo_duty_us(270) == 2500


def test_servo_duty_monotonic():
    values = [servo_duty_us(a) for a in range(-90, 271, 30)]
    assert values == sorted(values)
    assert all(500 <= v <= 2500 for v in values)


def test_servo_duty_open_angle():
    assert servo_duty_us(180) == 2000


def test_top_class_first_wins_tie():
    assert top_class([1, 7, 7, 2]) == 1


def test_top_class_picks_maximum():
    scores = [3, 0, 9, 4, 9, 1]
    assert scores[top_class(scores)] == max(scores)


def test_top_class_empty_raises():
    with pytest.raises(ValueError):
        top_class([])


def test_dequantize_zero_point_is_zero():
    assert dequantize(-128, -128, 0.25) == 0.0
    assert dequantize(7, 3, 1.0) == 4.0


def test_matches_key():
    assert matches_key([5, 5, 5, 5], (5, 5, 5, 5)) is True
    assert matches_key([5, 5, 5, 0], (5, 5, 5, 5)) is False
    assert matches_key([5, 5, 5], (5, 5, 5, 5)) is False


def _output(winner):
    values = [10] * 6
    values[winner] = 90
    return values


@pytest.mark.parametrize(
    "index, code",
    [
        (TRES_DEDOS_INDEX, "2"),
        (PULGAR_INDEX, "3"),
        (ABIERTA_INDEX, "4"),
        (CERRADO_INDEX, "5"),
        (ROCK_INDEX, "1"),
        (UN_DEDO_INDEX, "1"),
    ],
)
def test_classify_output(index, code):
    assert classify_output(_output(index), 0, 0.01) == code


def test_classify_output_reads_unsigned_bytes():
    signed = [10] * 6
    signed[PULGAR_INDEX] = -1
    unsigned = [10] * 6
    unsigned[PULGAR_INDEX] = 255
    assert classify_output(signed, 0, 0.001) == classify_output(unsigned, 0, 0.001)


def test_classify_output_too_short():
    with pytest.raises(ValueError):
        classify_output([1, 2, 3], 0, 1.0)


def test_lock_custom_keys():
    lock = GestureLock([[1, 2, 3, 4], [4, 3, 2, 1]])
    assert lock.check([1, 2, 3, 4], 0) == 2
    assert lock.check([4, 3, 2, 1], 1) == 1
    assert lock.check([1, 2, 3, 4], 1) is None


def test_lock_rejects_bad_keys():
    with pytest.raises(ValueError):
        GestureLock([[1, 2, 3, 4]])
    with pytest.raises(ValueError):
        GestureLock([[1, 2, 3], [1, 2, 3, 4]])