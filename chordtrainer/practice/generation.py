"""Chord pool construction and random session generation for practice drills.

A session either drills selected chord qualities on every chromatic root
("chordTypes" mode) or the diatonic triads of selected major keys ("scales"
mode). The pool is deduplicated, optionally expanded with inversions, and
sampled uniformly with replacement.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np

from ..theory.chord_types import (
    CHROMA_TO_NOTES,
    MAJOR_SCALE_INTERVALS,
    MAJOR_SCALE_QUALITIES,
    QUALITY_SUFFIXES,
    ROOT_NAMES,
    ChordIdentity,
    ChordQuality,
    get_quality,
)
from ..theory.conversion import note_name_to_pitch_class, parse_chord_name
from .inversions import add_inversions

logger = logging.getLogger(__name__)


class EmptyChordPoolError(ValueError):
    """Raised when a session config selects no chords to practice."""


class SessionMode(Enum):
    """Which part of the config selects the chord pool."""

    CHORD_TYPES = "chordTypes"
    SCALES = "scales"


@dataclass
class SessionChordConfig:
    """Chord selection for one practice session."""

    chord_count: int
    mode: SessionMode = SessionMode.CHORD_TYPES
    chord_type_ids: List[ChordQuality] = field(default_factory=list)
    scale_roots: List[int] = field(default_factory=list)  # Pitch classes of major keys
    include_inversions: bool = False

    def __post_init__(self):
        """Validate and coerce config values."""
        if self.chord_count < 1:
            raise ValueError(f"chord_count must be at least 1, got {self.chord_count}")
        if not isinstance(self.mode, SessionMode):
            self.mode = SessionMode(self.mode)
        self.chord_type_ids = [
            q if isinstance(q, ChordQuality) else get_quality(q)
            for q in self.chord_type_ids
        ]
        self.scale_roots = [_scale_root_pitch_class(root) for root in self.scale_roots]

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SessionChordConfig":
        """
        Create config from a dictionary.

        Accepts snake_case keys or the camelCase keys used by the practice app
        (chordCount, chordTypes, scales, includeInversions). Scale roots may be
        note names ("Db", "F#") or pitch classes.
        """
        def pick(*keys, default=None):
            for key in keys:
                if key in d:
                    return d[key]
            return default

        return cls(
            chord_count=int(pick("chord_count", "chordCount", default=1)),
            mode=SessionMode(pick("mode", default=SessionMode.CHORD_TYPES.value)),
            chord_type_ids=list(pick("chord_type_ids", "chord_types", "chordTypes", default=[])),
            scale_roots=list(pick("scale_roots", "scales", default=[])),
            include_inversions=bool(pick("include_inversions", "includeInversions", default=False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "chord_count": self.chord_count,
            "mode": self.mode.value,
            "chord_type_ids": [q.value for q in self.chord_type_ids],
            "scale_roots": [ROOT_NAMES[pc] for pc in self.scale_roots],
            "include_inversions": self.include_inversions,
        }


# Fallback session used when a single chord is requested without a config
DEFAULT_SESSION_CONFIG = {
    "chord_count": 1,
    "mode": "chordTypes",
    "chord_type_ids": ["maj", "min"],
    "scale_roots": ["C"],
    "include_inversions": False,
}


def _scale_root_pitch_class(root: Union[int, str]) -> int:
    if isinstance(root, str):
        pitch_class = note_name_to_pitch_class(root)
        if pitch_class is None:
            raise ValueError(f"Unknown scale root: '{root}'")
        return pitch_class
    if not 0 <= root <= 11:
        raise ValueError(f"Scale root must be 0-11, got {root}")
    return root


def get_scale_chords(scale_root: Union[int, str], chord_types: Sequence[ChordQuality]) -> List[str]:
    """
    Get the diatonic triads of a major scale.

    A degree contributes a chord only if its natural quality (I, IV, V major;
    ii, iii, vi minor; vii diminished) is among chord_types.

    Args:
        scale_root: Key as pitch class or note name (e.g. "G", "Eb")
        chord_types: Qualities to include

    Returns:
        Chord names in degree order (e.g. ["C", "Dm", "Em", "F", "G", "Am", "Bdim"])
    """
    root_pc = _scale_root_pitch_class(scale_root)
    chords = []

    for degree, interval in enumerate(MAJOR_SCALE_INTERVALS):
        chord_root_name = ROOT_NAMES[(root_pc + interval) % 12]
        natural_quality = MAJOR_SCALE_QUALITIES[degree]

        if natural_quality in chord_types:
            chords.append(chord_root_name + QUALITY_SUFFIXES[natural_quality])

    return chords


def get_all_chromatic_chords(chord_types: Sequence[ChordQuality]) -> List[str]:
    """
    Get the selected chord types on all 12 roots, in every enharmonic spelling.

    Example:
        >>> get_all_chromatic_chords([ChordQuality.MAJOR])[:4]
        ['C', 'C#', 'Db', 'D']
    """
    chords = []
    for quality in chord_types:
        for note_variants in CHROMA_TO_NOTES:
            for root_name in note_variants:
                chords.append(root_name + QUALITY_SUFFIXES[quality])
    return chords


def build_chord_pool(config: SessionChordConfig) -> List[ChordIdentity]:
    """
    Build the deduplicated pool a session draws from.

    In scales mode every catalogue quality is offered to the scale filter,
    not the session's chord_type_ids, so only diatonic triads appear.

    Args:
        config: Session chord selection

    Returns:
        Unique chords in first-seen order, followed by their inversions when
        include_inversions is set
    """
    if config.mode == SessionMode.SCALES:
        all_chord_types = list(ChordQuality)
        names: List[str] = []
        for scale_root in config.scale_roots:
            names.extend(get_scale_chords(scale_root, all_chord_types))
    else:
        names = get_all_chromatic_chords(config.chord_type_ids)

    # Spelling variants collapse to one identity here
    unique_chords = list(dict.fromkeys(parse_chord_name(name) for name in names))

    if config.include_inversions:
        return add_inversions(unique_chords)
    return unique_chords


def generate_session_chords(
    config: SessionChordConfig,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> List[ChordIdentity]:
    """
    Generate the chord sequence for a practice session.

    Chords are drawn independently and uniformly from the pool, so repeats
    are expected.

    Args:
        config: Session chord selection
        rng: Random generator to draw with; created from seed if None
        seed: Optional random seed for reproducibility

    Returns:
        List of config.chord_count chords in draw order

    Raises:
        EmptyChordPoolError: If the config selects no chords
    """
    chords_pool = build_chord_pool(config)
    if not chords_pool:
        raise EmptyChordPoolError(
            f"No chords to practice for mode '{config.mode.value}': "
            f"select at least one chord type or scale"
        )

    logger.debug(
        f"Drawing {config.chord_count} chords from a pool of {len(chords_pool)} "
        f"({config.mode.value}, inversions={config.include_inversions})"
    )

    if rng is None:
        rng = np.random.default_rng(seed)

    indices = rng.integers(0, len(chords_pool), size=config.chord_count)
    return [chords_pool[int(i)] for i in indices]


def get_random_chord(
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> ChordIdentity:
    """Draw a single major or minor chord on any root."""
    config = SessionChordConfig.from_dict(DEFAULT_SESSION_CONFIG)
    return generate_session_chords(config, rng=rng, seed=seed)[0]
