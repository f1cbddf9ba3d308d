"""Test suite for chord detection and target matching.

Covers root position and inversion detection, round trips through display
voicings, and octave/enharmonic invariance of matching.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from chordtrainer.practice import expand_inversions
from chordtrainer.recognition import (
    chords_match,
    detect_chord,
    detect_chord_name,
    find_candidates,
    matches_chord,
)
from chordtrainer.theory import ChordIdentity, ChordQuality, parse_chord_name, voice_chord


def all_root_position_chords():
    return [ChordIdentity(root=r, quality=q) for r in range(12) for q in ChordQuality]


def test_detect_scenarios():
    """Test C major in root position and both inversions."""
    print("Testing chord detection scenarios...")

    assert detect_chord_name({60, 64, 67}) == "C"
    assert detect_chord_name({64, 67, 72}) == "C/E"
    assert detect_chord_name({67, 72, 76}) == "C/G"

    chord = detect_chord({64, 67, 72})
    assert chord == ChordIdentity(root=0, quality=ChordQuality.MAJOR, bass=4)

    # Doubled notes and wide spacing
    assert detect_chord_name([48, 60, 64, 67, 72]) == "C"
    assert detect_chord_name([40, 60, 67, 72]) == "C/E"
    assert detect_chord_name([43, 53, 59, 62]) == "G7"
    assert detect_chord_name([53, 55, 59, 62]) == "G7/F"

    # C6 is not catalogued; the same tones read as Am7 over C
    assert detect_chord_name({60, 64, 67, 69}) == "Am7/C"

    print("[PASS] Detection scenarios correct")


def test_detect_no_match():
    """Test insufficient and uncatalogued note sets."""
    print("Testing detection without a match...")

    assert detect_chord(set()) is None
    assert detect_chord({60}) is None
    assert detect_chord({60, 64}) is None
    assert detect_chord({60, 64, 72}) is None, "Two pitch classes are never a chord"
    assert detect_chord({60, 61, 62}) is None
    assert detect_chord({60, 65, 67}) is None, "sus4 is not catalogued"
    assert detect_chord_name({60, 61, 62}) == ""

    try:
        detect_chord({60, 64, 200})
        assert False, "Out-of-range note should raise ValueError"
    except ValueError:
        pass

    print("[PASS] Non-chords return None")


def test_find_candidates():
    """Test exact template matching."""
    print("Testing candidate search...")

    assert find_candidates({0, 4, 7}) == [ChordIdentity(root=0, quality=ChordQuality.MAJOR)]
    assert find_candidates({0, 4}) == []
    assert find_candidates({0, 4, 7, 11, 2}) == []

    print("[PASS] Candidates require exact set equality")


def test_detect_round_trip():
    """Test every voiced chord and inversion is detected as itself."""
    print("Testing detection round trip...")

    count = 0
    for chord in all_root_position_chords():
        detected = detect_chord(voice_chord(chord))
        assert detected == chord, f"{chord.name} detected as {detected}"
        count += 1

        for inversion in expand_inversions(chord):
            detected = detect_chord(voice_chord(inversion))
            assert detected is not None and detected.bass == inversion.bass, \
                f"{inversion.name} detected as {detected}"
            assert detected == inversion
            count += 1

    print(f"[PASS] {count} voicings detected correctly")


def test_match_scenarios():
    """Test matching against root position and inverted targets."""
    print("Testing matching scenarios...")

    held = {67, 72, 76}
    assert matches_chord(held, parse_chord_name("C/G"))
    assert matches_chord(held, parse_chord_name("C")), "Root position accepts any voicing"
    assert not matches_chord(held, parse_chord_name("C/E"))

    assert matches_chord(held, "C/G"), "Chord names are accepted as targets"
    assert not matches_chord(held, "Am")
    assert not matches_chord(held, "not a chord")
    assert not matches_chord(held, "")

    print("[PASS] Matching scenarios correct")


def test_match_requires_exact_tones():
    """Test subsets, supersets and dyads never match."""
    print("Testing matching tone sets...")

    c_major = parse_chord_name("C")
    assert not matches_chord({60, 64}, c_major)
    assert not matches_chord({60, 64, 72}, c_major)
    assert not matches_chord({60, 64, 67, 71}, c_major)
    assert matches_chord({60, 64, 67, 71}, "Cmaj7")
    assert not matches_chord({60, 64, 67}, "Cmaj7")

    print("[PASS] Only exact tone sets match")


def test_match_octave_invariance():
    """Test transposing held notes by an octave never changes the result."""
    print("Testing octave invariance...")

    targets = []
    for chord in all_root_position_chords():
        targets.append(chord)
        targets.extend(expand_inversions(chord))

    held_sets = [voice_chord(t) for t in targets[::5]] + [[60, 61, 62], [60, 64, 67, 70]]

    for held in held_sets:
        for target in targets:
            expected = matches_chord(held, target)
            for shift in (-12, 12):
                shifted = [n + shift for n in held]
                assert matches_chord(shifted, target) == expected, \
                    f"{held} shifted by {shift} changed result for {target.name}"

    print("[PASS] Matching is octave-invariant")


def test_match_enharmonic_invariance():
    """Test flat and sharp spellings of a target give identical results."""
    print("Testing enharmonic invariance...")

    pairs = [
        ("Db", "C#"),
        ("Ebm/Gb", "D#m/F#"),
        ("Bb7/Ab", "A#7/G#"),
        ("Abmaj7", "G#maj7"),
        ("Gbm7b5/C", "F#m7b5/C"),
    ]
    for flat_name, sharp_name in pairs:
        assert parse_chord_name(flat_name) == parse_chord_name(sharp_name)
        for held in (voice_chord(parse_chord_name(sharp_name)), [61, 65, 68], [66, 70, 75]):
            assert matches_chord(held, flat_name) == matches_chord(held, sharp_name), \
                f"{flat_name} and {sharp_name} disagree on {held}"
        assert matches_chord(voice_chord(parse_chord_name(sharp_name)), flat_name)

    print("[PASS] Matching is enharmonic-invariant")


def test_chords_match():
    """Test comparing a detected chord with a target chord."""
    print("Testing chord-to-chord comparison...")

    assert chords_match("C/E", "C/E")
    assert chords_match("Db", "C#")
    assert chords_match(detect_chord({64, 67, 72}), "C/E")
    assert not chords_match("C", "C/E")
    assert not chords_match("C/G", "C/E")
    assert not chords_match("C", "Am")
    assert not chords_match("", "C")
    assert not chords_match("C", "???")

    print("[PASS] Chord comparison correct")


def main():
    """Run all tests and report results."""
    print("=" * 60)
    print("Chord Trainer - Recognition Tests")
    print("=" * 60)
    print()

    try:
        test_detect_scenarios()
        test_detect_no_match()
        test_find_candidates()
        test_detect_round_trip()
        test_match_scenarios()
        test_match_requires_exact_tones()
        test_match_octave_invariance()
        test_match_enharmonic_invariance()
        test_chords_match()
        print()

        print("=" * 60)
        print("All tests passed!")
        print("=" * 60)

    except Exception as e:
        print(f"\nTest failed with error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
