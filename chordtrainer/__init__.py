"""Chord theory engine for keyboard chord drills."""

from .theory import (
    ChordIdentity,
    ChordQuality,
    chord_identity_to_name,
    chord_tones,
    note_to_pitch_class,
    parse_chord_name,
    pitch_class_to_name,
    voice_chord,
)
from .recognition import chords_match, detect_chord, matches_chord
from .practice import (
    EmptyChordPoolError,
    SessionChordConfig,
    SessionMode,
    expand_inversions,
    generate_session_chords,
)

__all__ = [
    "ChordIdentity",
    "ChordQuality",
    "EmptyChordPoolError",
    "SessionChordConfig",
    "SessionMode",
    "chord_identity_to_name",
    "chord_tones",
    "chords_match",
    "detect_chord",
    "expand_inversions",
    "generate_session_chords",
    "matches_chord",
    "note_to_pitch_class",
    "parse_chord_name",
    "pitch_class_to_name",
    "voice_chord",
]
