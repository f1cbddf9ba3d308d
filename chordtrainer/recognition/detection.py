"""Chord detection from held note numbers."""

from typing import Iterable, List, Optional

from ..theory.chord_types import ChordIdentity, ChordQuality
from ..theory.conversion import bass_pitch_class, held_pitch_classes

# A dyad or single note is never a chord
MIN_DISTINCT_PITCH_CLASSES = 3


def find_candidates(pitch_classes: Iterable[int]) -> List[ChordIdentity]:
    """
    All root-position chords whose tone set equals the given pitch classes.

    Enumerates roots 0-11 and, for each root, the catalogue qualities in
    order. A candidate matches only on exact set equality.
    """
    target = frozenset(pitch_classes)
    candidates = []
    for root in range(12):
        for quality in ChordQuality:
            chord = ChordIdentity(root=root, quality=quality)
            if frozenset(chord.get_pitch_classes()) == target:
                candidates.append(chord)
    return candidates


def detect_chord(held_notes: Iterable[int]) -> Optional[ChordIdentity]:
    """
    Detect the chord formed by a set of held notes.

    Candidates that explain the lowest note as a non-root chord tone are
    returned as inversions first; otherwise a candidate rooted on the lowest
    note is returned in root position.

    Args:
        held_notes: Note numbers currently sounding

    Returns:
        ChordIdentity with bass set for inversions, or None if the notes do
        not form a catalogued chord

    Example:
        >>> detect_chord({64, 67, 72}).name
        'C/E'
    """
    notes = list(held_notes)
    pitch_classes = held_pitch_classes(notes)
    if len(pitch_classes) < MIN_DISTINCT_PITCH_CLASSES:
        return None

    bass = bass_pitch_class(notes)
    candidates = find_candidates(pitch_classes)
    if not candidates:
        return None

    # First pass: inversions (bass is a non-root chord tone)
    for chord in candidates:
        if bass != chord.root and bass in chord.get_pitch_classes():
            return ChordIdentity(root=chord.root, quality=chord.quality, bass=bass)

    # Second pass: root position
    for chord in candidates:
        if bass == chord.root:
            return chord

    return candidates[0]


def detect_chord_name(held_notes: Iterable[int]) -> str:
    """Name of the detected chord, or an empty string when nothing matches."""
    chord = detect_chord(held_notes)
    return chord.name if chord is not None else ""
