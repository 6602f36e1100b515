# microsense

Small, dependency-free building blocks for the post-processing side of compact
speech-command and hand-gesture recognition models.

## What is inside

- `microsense.settings`: model constants such as feature sizes
  (`FEATURE_SIZE`, `FEATURE_COUNT`), image dimensions (`NUM_ROWS`,
  `NUM_COLS`), output indices and the category labels
  `SPEECH_CATEGORY_LABELS` and `GESTURE_CATEGORY_LABELS`.
- `microsense.recognize_commands`: `RecognizeCommands` averages a stream of
  quantised classifier outputs (`ScoreTensor`) over a time window and returns
  a `RecognitionResult` with the command found, its averaged score and whether
  it counts as a new command. Recent results are kept in a fixed-capacity
  `PreviousResultsQueue` (50 entries). Malformed shapes, a non-`int8` dtype or
  timestamps that go backwards raise `RecognitionError`.
- `microsense.detection_responder`: `respond_to_detection` takes six gesture
  scores and returns the code (`"0"` to `"5"`) of the one with the highest
  rounded percentage.
- `microsense.image`: `rgb565_to_gray` converts a byte-swapped RGB565 pixel to
  a signed grey level, `convert_rgb565_frame` turns a whole frame into model
  input plus a 2x upscaled display buffer, and `quantize_grayscale` maps
  unsigned grey levels to signed 8-bit input.
- `microsense.activations`: `relu6` clamps values to the range 0 to 6.
- `microsense.gesture_lock`: `GestureLock` decides which servo to open for an
  entered sequence of four gestures, with helpers `top_class`, `dequantize`,
  `classify_output`, `matches_key` and `servo_duty_us`.

## Example

```python
from microsense.recognize_commands import RecognizeCommands, ScoreTensor

recognizer = RecognizeCommands(1000, 0.8, 1500, 3)
scores = ScoreTensor(scores=[-128, -128, 127, -128], scale=1 / 256, zero_point=-128)
for t in (0, 300, 600):
    result = recognizer.process_latest_results(scores, t)
print(result)
# RecognitionResult(found_command='yes', score=0.99609375, is_new_command=True)
```

```python
from microsense.gesture_lock import GestureLock

lock = GestureLock()            # keys (5, 5, 5, 5) and (0, 0, 0, 0)
print(lock.check([0, 0, 0, 0], locker_state=1))  # 1
print(lock.check([1, 2, 3, 4], locker_state=0))  # None
```

## What it does not do

The package works on numbers you hand it. It does not capture audio or camera
frames, compute spectrogram features, run a neural network, stream bytes
between threads, or drive GPIO pins and servos; `GestureLock.check` only
tells you which servo would be opened. There is no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```