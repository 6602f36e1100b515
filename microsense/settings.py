"""Model settings shared by the keyword-spotting and gesture-recognition code."""

# Audio keyword-spotting model. These values come from how the model was
# trained; changing the input preprocessing means updating all of them.
MAX_AUDIO_SAMPLE_SIZE = 512
AUDIO_SAMPLE_FREQUENCY = 16000
FEATURE_SIZE = 40
FEATURE_COUNT = 49
FEATURE_ELEMENT_COUNT = FEATURE_SIZE * FEATURE_COUNT
FEATURE_STRIDE_MS = 20
FEATURE_DURATION_MS = 30

SPEECH_CATEGORY_LABELS: tuple[str, ...] = ("silence", "unknown", "yes", "no")
SPEECH_CATEGORY_COUNT = len(SPEECH_CATEGORY_LABELS)

# Hand-gesture image model.
NUM_COLS = 96
NUM_ROWS = 96
NUM_CHANNELS = 1
MAX_IMAGE_SIZE = NUM_COLS * NUM_ROWS * NUM_CHANNELS

ABIERTA_INDEX = 0
CERRADO_INDEX = 1
PULGAR_INDEX = 2
ROCK_INDEX = 3
TRES_DEDOS_INDEX = 4
UN_DEDO_INDEX = 5

GESTURE_CATEGORY_LABELS: tuple[str, ...] = (
    "undedo",
    "rock",
    "tresdedos",
    "pulgar",
    "abierta",
    "cerrado",
)
GESTURE_CATEGORY_COUNT = len(GESTURE_CATEGORY_LABELS)