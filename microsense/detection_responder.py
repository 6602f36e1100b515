"""Picks the gesture code reported for one set of class scores."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def _percent(score: float) -> int:
    return int(score * 100 + 0.5)


def respond_to_detection(
    un_dedo_score: float,
    rock_score: float,
    tres_dedos_score: float,
    pulgar_score: float,
    abierta_score: float,
    cerrado_score: float,
) -> str:
    """Return the code ("0" to "5") of the highest-scoring gesture.

    Scores are compared as rounded percentages; on a tie the earlier gesture
    wins. The starting code is "1", so it is also the answer whenever no score
    beats the "un dedo" score.
    """
    percents = [
        _percent(score)
        for score in (
            un_dedo_score,
            rock_score,
            tres_dedos_score,
            pulgar_score,
            abierta_score,
            cerrado_score,
        )
    ]
    logger.info(
        "Scores - Un Dedo: %d%%, Rock: %d%%, Tres Dedos: %d%%, Pulgar: %d%%, "
        "Abierta: %d%%, Cerrado: %d%%",
        *percents,
    )
    best = percents[0]
    code = "1"
    for index, value in enumerate(percents):
        if value > best:
            best = value
            code = str(index)
    return code