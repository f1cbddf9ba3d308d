"""
Inversion expansion for root-position chords.

An inversion puts a non-root chord tone in the bass and is written in slash
notation: C/E (first inversion), C/G (second), Cmaj7/B (third, seventh chords
only).
"""

from typing import Iterable, List

from ..theory.chord_types import ChordIdentity
from ..theory.conversion import chord_tones

INVERSION_TYPES = {
    1: "first_inv",   # 3rd in the bass
    2: "second_inv",  # 5th in the bass
    3: "third_inv",   # 7th in the bass (only for 7th chords)
}


def expand_inversions(chord: ChordIdentity) -> List[ChordIdentity]:
    """
    List the inversions of a root-position chord.

    Each non-root tone, in catalogue order, becomes the bass of one
    inversion, so triads give 2 inversions and seventh chords give 3. The
    root position itself is not included.

    Args:
        chord: Root-position chord

    Returns:
        Inverted chords ordered first, second, third inversion

    Raises:
        ValueError: If the chord is already inverted

    Example:
        >>> [c.name for c in expand_inversions(parse_chord_name("Cmaj7"))]
        ['Cmaj7/E', 'Cmaj7/G', 'Cmaj7/B']
    """
    if chord.bass is not None:
        raise ValueError(f"Cannot expand inversions of an inverted chord: {chord.name}")

    tones = chord_tones(chord)
    return [
        ChordIdentity(root=chord.root, quality=chord.quality, bass=bass)
        for bass in tones[1:]
    ]


def add_inversions(chords: Iterable[ChordIdentity]) -> List[ChordIdentity]:
    """
    Follow every chord with its inversions.

    Example:
        >>> [c.name for c in add_inversions([parse_chord_name("C"), parse_chord_name("Am")])]
        ['C', 'C/E', 'C/G', 'Am', 'Am/C', 'Am/E']
    """
    chords_with_inversions: List[ChordIdentity] = []
    for chord in chords:
        chords_with_inversions.append(chord)
        chords_with_inversions.extend(expand_inversions(chord))
    return chords_with_inversions


def inversion_type(chord: ChordIdentity) -> str:
    """Inversion label of a chord: 'root', 'first_inv', 'second_inv' or 'third_inv'."""
    if chord.bass is None:
        return "root"
    return INVERSION_TYPES[chord_tones(chord).index(chord.bass)]
