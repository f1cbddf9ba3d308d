"""Chord catalogue and note/chord conversion."""

from .chord_types import (
    CHROMA_TO_NOTES,
    FLAT_TO_SHARP,
    MAJOR_SCALE_INTERVALS,
    MAJOR_SCALE_QUALITIES,
    QUALITY_DISPLAY_NAMES,
    QUALITY_INTERVALS,
    QUALITY_SUFFIXES,
    ROMAN_NUMERALS,
    ROOT_NAMES,
    SCALE_ROOTS,
    ChordIdentity,
    ChordQuality,
    degree_numeral,
    get_quality,
)
from .conversion import (
    bass_pitch_class,
    chord_identity_to_name,
    chord_note_names,
    chord_tones,
    held_pitch_classes,
    midi_note_to_name,
    normalize_note_to_sharp,
    note_name_to_pitch_class,
    note_to_pitch_class,
    parse_chord_name,
    pitch_class_to_name,
    voice_chord,
)

__all__ = [
    # Catalogue
    "CHROMA_TO_NOTES",
    "FLAT_TO_SHARP",
    "MAJOR_SCALE_INTERVALS",
    "MAJOR_SCALE_QUALITIES",
    "QUALITY_DISPLAY_NAMES",
    "QUALITY_INTERVALS",
    "QUALITY_SUFFIXES",
    "ROMAN_NUMERALS",
    "ROOT_NAMES",
    "SCALE_ROOTS",
    "ChordIdentity",
    "ChordQuality",
    "degree_numeral",
    "get_quality",
    # Conversion
    "bass_pitch_class",
    "chord_identity_to_name",
    "chord_note_names",
    "chord_tones",
    "held_pitch_classes",
    "midi_note_to_name",
    "normalize_note_to_sharp",
    "note_name_to_pitch_class",
    "note_to_pitch_class",
    "parse_chord_name",
    "pitch_class_to_name",
    "voice_chord",
]
