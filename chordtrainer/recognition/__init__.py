"""Chord detection and target matching for live note input."""

from .detection import (
    MIN_DISTINCT_PITCH_CLASSES,
    detect_chord,
    detect_chord_name,
    find_candidates,
)
from .matching import chords_match, matches_chord

__all__ = [
    "MIN_DISTINCT_PITCH_CLASSES",
    "chords_match",
    "detect_chord",
    "detect_chord_name",
    "find_candidates",
    "matches_chord",
]
