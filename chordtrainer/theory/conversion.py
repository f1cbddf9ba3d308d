"""
Conversion between note numbers, pitch classes, note names and chord names.

Note numbers are MIDI-style integers (0-127, middle C = 60). Pitch classes are
0-11 with C = 0. Names are always produced with sharp spellings; flat
spellings are accepted on input and normalized so enharmonic spelling never
changes a detection or matching result.
"""

import logging
import re
from typing import FrozenSet, Iterable, List, Optional

from .chord_types import (
    CHROMA_TO_NOTES,
    FLAT_TO_SHARP,
    QUALITY_SUFFIXES,
    ROOT_NAMES,
    ChordIdentity,
    ChordQuality,
)

logger = logging.getLogger(__name__)

NOTE_MIN = 0
NOTE_MAX = 127

# Chord name: root letter with optional accidental, suffix, optional "/bass"
_CHORD_NAME_PATTERN = re.compile(r"^([A-G][#b]?)([^/]*)(?:/([A-G][#b]?))?$")

# Catalogue suffixes plus the aliases accepted when parsing
_SUFFIX_TO_QUALITY = {suffix: quality for quality, suffix in QUALITY_SUFFIXES.items()}
_SUFFIX_TO_QUALITY.update({
    "M": ChordQuality.MAJOR,
    "maj": ChordQuality.MAJOR,
    "min": ChordQuality.MINOR,
    "M7": ChordQuality.MAJOR_7,
    "min7": ChordQuality.MINOR_7,
    "dom7": ChordQuality.DOMINANT_7,
})

_NAME_TO_PITCH_CLASS = {
    name: pitch_class
    for pitch_class, variants in enumerate(CHROMA_TO_NOTES)
    for name in variants
}


def _check_note(midi_note: int) -> int:
    if not NOTE_MIN <= midi_note <= NOTE_MAX:
        raise ValueError(f"Note number must be {NOTE_MIN}-{NOTE_MAX}, got {midi_note}")
    return midi_note


def note_to_pitch_class(midi_note: int) -> int:
    """Convert a note number to its pitch class (0-11)."""
    return _check_note(midi_note) % 12


def pitch_class_to_name(pitch_class: int) -> str:
    """Sharp-preferred name of a pitch class, e.g. 1 -> 'C#'."""
    if not 0 <= pitch_class <= 11:
        raise ValueError(f"Pitch class must be 0-11, got {pitch_class}")
    return ROOT_NAMES[pitch_class]


def normalize_note_to_sharp(note_name: str) -> str:
    """
    Normalize a note name to sharp notation.

    Example:
        >>> normalize_note_to_sharp("Db")
        'C#'
        >>> normalize_note_to_sharp("E")
        'E'
    """
    return FLAT_TO_SHARP.get(note_name, note_name)


def note_name_to_pitch_class(note_name: str) -> Optional[int]:
    """Pitch class of a note name in either spelling, None if unrecognized."""
    return _NAME_TO_PITCH_CLASS.get(note_name)


def midi_note_to_name(midi_note: int) -> str:
    """Convert a note number to a name with octave, e.g. 60 -> 'C4'."""
    octave = _check_note(midi_note) // 12 - 1
    return f"{ROOT_NAMES[midi_note % 12]}{octave}"


def held_pitch_classes(held_notes: Iterable[int]) -> FrozenSet[int]:
    """Distinct pitch classes of a held-note set, octaves collapsed."""
    return frozenset(note_to_pitch_class(note) for note in held_notes)


def bass_pitch_class(held_notes: Iterable[int]) -> Optional[int]:
    """Pitch class of the lowest held note, None when nothing is held."""
    notes = list(held_notes)
    if not notes:
        return None
    return note_to_pitch_class(min(notes))


def chord_identity_to_name(identity: ChordIdentity) -> str:
    """Display name of a chord identity, e.g. 'Am/E'."""
    return identity.name


def parse_chord_name(chord_name: str) -> Optional[ChordIdentity]:
    """
    Parse a chord name of the form <Root><Suffix>[/<Bass>].

    Flat spellings are normalized ("Bbm7" is A#m7). A bass equal to the root
    parses as root position.

    Args:
        chord_name: Chord name such as "C", "F#m", "Ebmaj7/G"

    Returns:
        ChordIdentity, or None if the root, suffix or bass is not recognized
        or the bass is not a tone of the chord
    """
    match = _CHORD_NAME_PATTERN.match(chord_name.strip())
    if match is None:
        logger.debug(f"Unrecognized chord name: {chord_name!r}")
        return None

    root_name, suffix, bass_name = match.groups()
    quality = _SUFFIX_TO_QUALITY.get(suffix)
    root = note_name_to_pitch_class(root_name)
    if quality is None or root is None:
        logger.debug(f"Unrecognized root or suffix in chord name: {chord_name!r}")
        return None

    bass = None
    if bass_name is not None:
        bass = note_name_to_pitch_class(bass_name)
        if bass is None:
            return None
        if bass == root:
            bass = None

    try:
        return ChordIdentity(root=root, quality=quality, bass=bass)
    except ValueError as e:
        logger.debug(f"Rejected chord name {chord_name!r}: {e}")
        return None


def chord_tones(identity: ChordIdentity) -> List[int]:
    """
    Pitch classes of a chord in catalogue order, root first.

    The order ignores any inversion bass.

    Example:
        >>> chord_tones(ChordIdentity(root=9, quality=ChordQuality.MINOR))
        [9, 0, 4]
    """
    return identity.get_pitch_classes()


def chord_note_names(identity: ChordIdentity) -> List[str]:
    """Note names of a chord's tones, e.g. Am -> ['A', 'C', 'E']."""
    return [ROOT_NAMES[pc] for pc in chord_tones(identity)]


def voice_chord(identity: ChordIdentity, base_note: int = 60) -> List[int]:
    """
    Build an ascending close voicing of a chord for display or playback.

    Inversions put the bass pitch class at base_note + bass and stack the
    remaining tones above it. Root position places the tones in catalogue
    order above base_note, raising each by an octave until it sits above the
    previous one.

    Args:
        identity: Chord to voice
        base_note: Note number of C in the voicing octave (60 = C4)

    Returns:
        Note numbers in ascending order, lowest first

    Example:
        >>> voice_chord(parse_chord_name("C/E"))
        [64, 67, 72]
    """
    tones = chord_tones(identity)

    if identity.bass is not None:
        bass_note = base_note + identity.bass
        upper_notes = []
        for pitch_class in tones:
            if pitch_class == identity.bass:
                continue
            note = base_note + pitch_class
            # Tones at or below the bass move up an octave
            if note <= bass_note:
                note += 12
            upper_notes.append(note)
        notes = [bass_note] + sorted(upper_notes)
    else:
        notes = []
        for pitch_class in tones:
            note = base_note + pitch_class
            while notes and note <= notes[-1]:
                note += 12
            notes.append(note)

    return [_check_note(note) for note in notes]
