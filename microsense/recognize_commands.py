"""Smoothing of streamed keyword-spotting scores into recognised commands."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from microsense.settings import SPEECH_CATEGORY_COUNT, SPEECH_CATEGORY_LABELS

logger = logging.getLogger(__name__)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class RecognitionError(ValueError):
    """Raised when results fed to the recogniser are malformed or out of order."""


@dataclass(frozen=True)
class ScoreTensor:
    """Quantized output of a recognition model run."""

    scores: Sequence[int]
    scale: float = 1.0
    zero_point: int = 0
    shape: tuple[int, ...] | None = None
    dtype: str = "int8"

    def __post_init__(self) -> None:
        if self.shape is None:
            object.__setattr__(self, "shape", (1, len(self.scores)))


@dataclass(frozen=True)
class RecognitionResult:
    """The outcome of processing one set of scores."""

    found_command: str
    score: float
    is_new_command: bool


class PreviousResultsQueue:
    """Bounded FIFO of recent model results, oldest at the front."""

    MAX_RESULTS = 50

    @dataclass(frozen=True)
    class Result:
        """One inference result and the time it was recorded."""

        time_ms: int = 0
        scores: tuple[int, ...] = field(default_factory=tuple)

    def __init__(self) -> None:
        self._results: list[PreviousResultsQueue.Result] = [
            self.Result() for _ in range(self.MAX_RESULTS)
        ]
        self._front_index = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[PreviousResultsQueue.Result]:
        return (self.from_front(offset) for offset in range(self._size))

    def _slot(self, offset: int) -> int:
        return (self._front_index + offset) % self.MAX_RESULTS

    def front(self) -> PreviousResultsQueue.Result:
        """Return the oldest result."""
        if not self._size:
            raise IndexError("queue is empty")
        return self._results[self._front_index]

    def back(self) -> PreviousResultsQueue.Result:
        """Return the newest result."""
        if not self._size:
            raise IndexError("queue is empty")
        return self._results[self._slot(self._size - 1)]

    def push_back(self, time_ms: int, scores: Sequence[int]) -> None:
        """Append a result; raises IndexError when the queue is full."""
        if self._size >= self.MAX_RESULTS:
            raise IndexError("couldn't push_back latest result, too many already")
        self._size += 1
        self._results[self._slot(self._size - 1)] = self.Result(
            int(time_ms), tuple(int(s) for s in scores)
        )

    def pop_front(self) -> PreviousResultsQueue.Result:
        """Remove and return the oldest result."""
        if self._size <= 0:
            raise IndexError("couldn't pop_front result, none present")
        result = self._results[self._front_index]
        self._front_index = self._slot(1)
        self._size -= 1
        return result

    def from_front(self, offset: int) -> PreviousResultsQueue.Result:
        """Return the result ``offset`` places after the oldest one."""
        if offset < 0 or offset >= self._size:
            raise IndexError("attempt to read beyond the end of the queue")
        return self._results[self._slot(offset)]


class RecognizeCommands:
    """Averages model scores over a time window and reports new commands.

    Timestamps fed to :meth:`process_latest_results` must not go backwards.
    """

    def __init__(
        self,
        average_window_duration_ms: int = 1000,
        detection_threshold: float = 0.8,
        suppression_ms: int = 1500,
        minimum_count: int = 3,
    ) -> None:
        self.average_window_duration_ms = average_window_duration_ms
        self.detection_threshold = detection_threshold
        self.suppression_ms = suppression_ms
        self.minimum_count = minimum_count
        self._previous_results = PreviousResultsQueue()
        self._previous_top_label = SPEECH_CATEGORY_LABELS[0]
        self._previous_top_label_time = _INT32_MIN

    def process_latest_results(
        self, latest_results: ScoreTensor, current_time_ms: int
    ) -> RecognitionResult:
        """Feed one model output and return the current recognition."""
        shape = tuple(latest_results.shape or ())
        if len(shape) != 2 or shape[0] != 1 or shape[1] != SPEECH_CATEGORY_COUNT:
            raise RecognitionError(
                f"The results for recognition should contain {SPEECH_CATEGORY_COUNT} "
                f"elements, but the shape is {shape}"
            )
        if latest_results.dtype != "int8":
            raise RecognitionError(
                "The results for recognition should be int8 elements, "
                f"but are {latest_results.dtype}"
            )

        queue = self._previous_results
        if len(queue) and current_time_ms < queue.front().time_ms:
            raise RecognitionError(
                "Results must be fed in increasing time order, but received a "
                f"timestamp of {current_time_ms} that was earlier than the "
                f"previous one of {queue.front().time_ms}"
            )

        try:
            queue.push_back(current_time_ms, latest_results.scores)
        except IndexError as exc:
            logger.warning("%s", exc)

        time_limit = current_time_ms - self.average_window_duration_ms
        while len(queue) and queue.front().time_ms < time_limit:
            queue.pop_front()

        how_many_results = len(queue)
        samples_duration = current_time_ms - queue.front().time_ms
        if how_many_results < self.minimum_count or samples_duration < int(
            self.average_window_duration_ms / 4
        ):
            return RecognitionResult(self._previous_top_label, 0.0, False)

        scale = latest_results.scale
        zero_point = latest_results.zero_point
        totals = [0.0] * SPEECH_CATEGORY_COUNT
        for result in queue:
            for i, raw in enumerate(result.scores[:SPEECH_CATEGORY_COUNT]):
                totals[i] += (raw - zero_point) * scale
        average_scores = [total / how_many_results for total in totals]

        current_top_index = 0
        current_top_score = 0.0
        for index, average in enumerate(average_scores):
            if average > current_top_score:
                current_top_score = average
                current_top_index = index
        current_top_label = SPEECH_CATEGORY_LABELS[current_top_index]

        if (
            self._previous_top_label == SPEECH_CATEGORY_LABELS[0]
            or self._previous_top_label_time == _INT32_MIN
        ):
            time_since_last_top = _INT32_MAX
        else:
            time_since_last_top = current_time_ms - self._previous_top_label_time

        is_new_command = current_top_score > self.detection_threshold and (
            current_top_label != self._previous_top_label
            or time_since_last_top > self.suppression_ms
        )
        if is_new_command:
            self._previous_top_label = current_top_label
            self._previous_top_label_time = current_time_ms

        return RecognitionResult(current_top_label, current_top_score, is_new_command)