"""
Validate held notes against a target chord.

Matching compares pitch classes, so octave placement and enharmonic spelling
of the target never affect the result. Root-position targets accept any
voicing of the right notes; inverted targets also pin the lowest note.
"""

import logging
from typing import Iterable, Optional, Union

from ..theory.chord_types import ChordIdentity
from ..theory.conversion import (
    bass_pitch_class,
    chord_tones,
    held_pitch_classes,
    parse_chord_name,
)
from .detection import MIN_DISTINCT_PITCH_CLASSES

logger = logging.getLogger(__name__)

ChordLike = Union[ChordIdentity, str]


def _resolve(chord: ChordLike) -> Optional[ChordIdentity]:
    if isinstance(chord, ChordIdentity):
        return chord
    if not chord:
        return None
    return parse_chord_name(chord)


def matches_chord(held_notes: Iterable[int], target: ChordLike) -> bool:
    """
    Check if held notes satisfy a target chord.

    Args:
        held_notes: Note numbers currently held
        target: Target chord, as a ChordIdentity or a chord name like "Am/E"

    Returns:
        True if the held pitch classes equal the chord's tones and, for an
        inverted target, the lowest held note is the target bass
    """
    target_chord = _resolve(target)
    if target_chord is None:
        return False

    notes = list(held_notes)
    pressed = held_pitch_classes(notes)
    if len(pressed) < MIN_DISTINCT_PITCH_CLASSES:
        return False

    if pressed != frozenset(chord_tones(target_chord)):
        return False

    # For root position, just check notes match
    if target_chord.bass is None:
        return True

    return bass_pitch_class(notes) == target_chord.bass


def chords_match(detected: ChordLike, target: ChordLike) -> bool:
    """
    Compare two chords by their tones and inversion bass.

    Args:
        detected: Chord reported by detection (identity or name)
        target: Chord the player was asked for (identity or name)

    Returns:
        True when both chords have the same tone set and, if either one is
        inverted, the same bass
    """
    detected_chord = _resolve(detected)
    target_chord = _resolve(target)
    if detected_chord is None or target_chord is None:
        return False

    notes_match = frozenset(chord_tones(detected_chord)) == frozenset(chord_tones(target_chord))

    if detected_chord.bass is None and target_chord.bass is None:
        return notes_match

    bass_match = detected_chord.bass == target_chord.bass
    if notes_match and not bass_match:
        logger.debug(
            f"Bass note mismatch: detected {detected_chord.name}, target {target_chord.name}"
        )

    return notes_match and bass_match
