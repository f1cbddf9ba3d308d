"""Chord vocabulary, practice keys and the chord identity representation."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

# Note names for human-readable output
ROOT_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Enharmonic spellings per pitch class, sharp first
CHROMA_TO_NOTES: List[List[str]] = [
    ["C"],
    ["C#", "Db"],
    ["D"],
    ["D#", "Eb"],
    ["E"],
    ["F"],
    ["F#", "Gb"],
    ["G"],
    ["G#", "Ab"],
    ["A"],
    ["A#", "Bb"],
    ["B"],
]

FLAT_TO_SHARP: Dict[str, str] = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}


class ChordQuality(Enum):
    """Chord qualities available for practice."""

    MAJOR = "maj"
    MINOR = "min"
    DIMINISHED = "dim"
    MAJOR_7 = "maj7"
    MINOR_7 = "min7"
    DOMINANT_7 = "dom7"
    HALF_DIMINISHED_7 = "m7b5"


# Interval patterns for each chord quality (semitones from root)
QUALITY_INTERVALS: Dict[ChordQuality, List[int]] = {
    ChordQuality.MAJOR: [0, 4, 7],                # Root, major 3rd, perfect 5th
    ChordQuality.MINOR: [0, 3, 7],                # Root, minor 3rd, perfect 5th
    ChordQuality.DIMINISHED: [0, 3, 6],           # Root, minor 3rd, diminished 5th
    ChordQuality.MAJOR_7: [0, 4, 7, 11],
    ChordQuality.MINOR_7: [0, 3, 7, 10],
    ChordQuality.DOMINANT_7: [0, 4, 7, 10],
    ChordQuality.HALF_DIMINISHED_7: [0, 3, 6, 10],
}

# Suffix appended to the root name, e.g. "C", "Cm", "C7"
QUALITY_SUFFIXES: Dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "",
    ChordQuality.MINOR: "m",
    ChordQuality.DIMINISHED: "dim",
    ChordQuality.MAJOR_7: "maj7",
    ChordQuality.MINOR_7: "m7",
    ChordQuality.DOMINANT_7: "7",
    ChordQuality.HALF_DIMINISHED_7: "m7b5",
}

QUALITY_DISPLAY_NAMES: Dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "major",
    ChordQuality.MINOR: "minor",
    ChordQuality.DIMINISHED: "diminished",
    ChordQuality.MAJOR_7: "major 7th",
    ChordQuality.MINOR_7: "minor 7th",
    ChordQuality.DOMINANT_7: "dominant 7th",
    ChordQuality.HALF_DIMINISHED_7: "half diminished",
}

# Practice keys as (id, display name); ids use the flat spelling for black keys
SCALE_ROOTS: List[Tuple[str, str]] = [
    ("C", "C"),
    ("Db", "C# / Db"),
    ("D", "D"),
    ("Eb", "D# / Eb"),
    ("E", "E"),
    ("F", "F"),
    ("Gb", "F# / Gb"),
    ("G", "G"),
    ("Ab", "G# / Ab"),
    ("A", "A"),
    ("Bb", "A# / Bb"),
    ("B", "B"),
]

# Major scale intervals (semitones from root)
MAJOR_SCALE_INTERVALS = [0, 2, 4, 5, 7, 9, 11]

# Diatonic triad quality per major scale degree (I, ii, iii, IV, V, vi, vii°)
MAJOR_SCALE_QUALITIES: List[ChordQuality] = [
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.MINOR,
    ChordQuality.MAJOR,
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
]

ROMAN_NUMERALS = ["I", "II", "III", "IV", "V", "VI", "VII"]


def get_quality(quality_id: str) -> ChordQuality:
    """
    Look up a chord quality by its catalogue id.

    Args:
        quality_id: Catalogue id such as "maj", "min7" or "m7b5"

    Returns:
        The matching ChordQuality

    Raises:
        ValueError: If the id is not in the catalogue
    """
    try:
        return ChordQuality(quality_id)
    except ValueError:
        valid_ids = ", ".join(q.value for q in ChordQuality)
        raise ValueError(
            f"Unknown chord quality: '{quality_id}'. Valid options are: {valid_ids}"
        ) from None


def degree_numeral(degree: int) -> str:
    """Roman numeral for a major scale degree (0-6), lowercase for minor/dim."""
    numeral = ROMAN_NUMERALS[degree]
    quality = MAJOR_SCALE_QUALITIES[degree]
    if quality in (ChordQuality.MINOR, ChordQuality.DIMINISHED):
        numeral = numeral.lower()
    if quality == ChordQuality.DIMINISHED:
        numeral += "°"
    return numeral


@dataclass(frozen=True)
class ChordIdentity:
    """A chord as root, quality and optional inversion bass."""

    root: int  # 0-11 (C=0, C#=1, ..., B=11)
    quality: ChordQuality
    bass: Optional[int] = None  # Non-root chord tone for inversions, None = root position

    def __post_init__(self):
        """Validate chord identity."""
        if not 0 <= self.root <= 11:
            raise ValueError(f"Root must be 0-11, got {self.root}")
        if not isinstance(self.quality, ChordQuality):
            raise ValueError(f"Quality must be a ChordQuality, got {self.quality!r}")
        if self.bass is not None:
            if not 0 <= self.bass <= 11:
                raise ValueError(f"Bass must be 0-11 or None, got {self.bass}")
            if self.bass not in self.get_pitch_classes()[1:]:
                raise ValueError(
                    f"Bass {ROOT_NAMES[self.bass]} is not a non-root tone of "
                    f"{ROOT_NAMES[self.root]}{QUALITY_SUFFIXES[self.quality]}"
                )

    def get_pitch_classes(self) -> List[int]:
        """Return list of pitch classes (0-11) in catalogue order, root first."""
        intervals = QUALITY_INTERVALS[self.quality]
        return [(self.root + interval) % 12 for interval in intervals]

    @property
    def is_inversion(self) -> bool:
        return self.bass is not None

    @property
    def root_position(self) -> "ChordIdentity":
        """The same chord with no bass override."""
        return ChordIdentity(root=self.root, quality=self.quality)

    @property
    def name(self) -> str:
        """Human-readable chord name, e.g. 'C', 'F#m', 'G7', 'Am/E'."""
        name = f"{ROOT_NAMES[self.root]}{QUALITY_SUFFIXES[self.quality]}"

        # Add bass note for inversions
        if self.bass is not None and self.bass != self.root:
            name = f"{name}/{ROOT_NAMES[self.bass]}"

        return name

    @property
    def root_name(self) -> str:
        """Get the root note name."""
        return ROOT_NAMES[self.root]

    def __str__(self) -> str:
        return self.name
