import pytest

from microsense.detection_responder import respond_to_detection


@pytest.mark.parametrize(
    "scores,expected",
    [
        ((0.1, 0.8, 0.05, 0.02, 0.02, 0.01), "1"),
        ((0.1, 0.1, 0.7, 0.05, 0.03, 0.02), "2"),
        ((0.0, 0.1, 0.1, 0.6, 0.1, 0.1), "3"),
        ((0.0, 0.1, 0.1, 0.1, 0.6, 0.1), "4"),
        ((0.0, 0.0, 0.0, 0.0, 0.0, 0.9), "5"),
    ],
)
def test_highest_score_wins(scores, expected):
    assert respond_to_detection(*scores) == expected


def test_un_dedo_leading_still_reports_default_code():
    assert respond_to_detection(0.9, 0.02, 0.02, 0.02, 0.02, 0.02) == "1"


def test_all_equal_scores_report_default_code():
    assert respond_to_detection(0.5, 0.5, 0.5, 0.5, 0.5, 0.5) == "1"


def test_tie_prefers_earlier_gesture():
    assert respond_to_detection(0.0, 0.1, 0.4, 0.4, 0.1, 0.0) == "2"


def test_differences_below_rounding_are_ties():
    assert respond_to_detection(0.0, 0.0, 0.501, 0.503, 0.0, 0.0) == "2"


def test_result_is_always_a_valid_code():
    result = respond_to_detection(0.2, 0.1, 0.3, 0.15, 0.15, 0.1)
    assert result in {"0", "1", "2", "3", "4", "5"}
    assert result == "2"