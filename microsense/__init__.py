"""Post-processing helpers for compact speech-command and gesture models."""

__version__ = "0.1.0"

__all__ = [
    "activations",
    "detection_responder",
    "gesture_lock",
    "image",
    "recognize_commands",
    "settings",
]