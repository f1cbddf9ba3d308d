"""Practice session chord pools, inversions and random draws."""

from .inversions import INVERSION_TYPES, add_inversions, expand_inversions, inversion_type
from .generation import (
    DEFAULT_SESSION_CONFIG,
    EmptyChordPoolError,
    SessionChordConfig,
    SessionMode,
    build_chord_pool,
    generate_session_chords,
    get_all_chromatic_chords,
    get_random_chord,
    get_scale_chords,
)

__all__ = [
    # Inversions
    "INVERSION_TYPES",
    "add_inversions",
    "expand_inversions",
    "inversion_type",
    # Generation
    "DEFAULT_SESSION_CONFIG",
    "EmptyChordPoolError",
    "SessionChordConfig",
    "SessionMode",
    "build_chord_pool",
    "generate_session_chords",
    "get_all_chromatic_chords",
    "get_random_chord",
    "get_scale_chords",
]
