#!/usr/bin/env python3
"""
CLI for generating chord practice sessions and detecting chords.

Examples:
    python scripts/practice_session.py --count 8 --chord-types maj min dom7 --inversions
    python scripts/practice_session.py --mode scales --scales G Eb --seed 7
    python scripts/practice_session.py --detect 64 67 72
"""

import argparse
import logging
import sys
from pathlib import Path

# Setup path to import from chordtrainer
sys.path.insert(0, str(Path(__file__).parent.parent))

from chordtrainer.practice import EmptyChordPoolError, generate_session_chords
from chordtrainer.recognition import detect_chord
from chordtrainer.theory import chord_note_names, midi_note_to_name, voice_chord
from chordtrainer.utils import load_config, load_session_config

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_arguments():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate a chord practice session",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "--config",
        type=str,
        default="configs/practice.yaml",
        help="Path to practice configuration YAML (default: configs/practice.yaml)"
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of chords to generate (overrides config)"
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=["chordTypes", "scales"],
        default=None,
        help="Pool mode (overrides config)"
    )
    parser.add_argument(
        "--chord-types",
        type=str,
        nargs="+",
        default=None,
        help="Chord quality ids, e.g. maj min dom7 (overrides config)"
    )
    parser.add_argument(
        "--scales",
        type=str,
        nargs="+",
        default=None,
        help="Major keys for scales mode, e.g. C G Eb (overrides config)"
    )
    parser.add_argument(
        "--inversions",
        action="store_true",
        help="Include inversions in the chord pool"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "--base-note",
        type=int,
        default=None,
        help="Note number of C in the voicing octave (default from config, 60)"
    )
    parser.add_argument(
        "--detect",
        type=int,
        nargs="+",
        default=None,
        metavar="NOTE",
        help="Detect the chord formed by these note numbers instead of generating"
    )

    return parser.parse_args()


def run_detection(notes):
    """Print the chord detected for a set of note numbers."""
    note_names = " ".join(midi_note_to_name(n) for n in sorted(notes))
    chord = detect_chord(notes)
    if chord is None:
        print(f"{note_names}: no chord")
    else:
        print(f"{note_names}: {chord.name}")


def run_session(args):
    """Generate and print a practice session."""
    config = load_config(args.config)

    overrides = {}
    if args.count is not None:
        overrides["chord_count"] = args.count
    if args.mode is not None:
        overrides["mode"] = args.mode
    if args.chord_types is not None:
        overrides["chord_type_ids"] = args.chord_types
    if args.scales is not None:
        overrides["scale_roots"] = args.scales
    if args.inversions:
        overrides["include_inversions"] = True

    session_config = load_session_config(args.config, overrides=overrides)
    seed = args.seed if args.seed is not None else config.get("seed")
    base_note = args.base_note
    if base_note is None:
        base_note = config.get("voicing", {}).get("base_note", 60)

    logger.info(f"Session config: {session_config.to_dict()}")
    chords = generate_session_chords(session_config, seed=seed)

    print("\n" + "=" * 60)
    print(f"  CHORD PRACTICE SESSION ({len(chords)} chords)")
    print("=" * 60)
    for i, chord in enumerate(chords, 1):
        notes = voice_chord(chord, base_note=base_note)
        names = "-".join(chord_note_names(chord))
        voiced = " ".join(midi_note_to_name(n) for n in notes)
        print(f"{i:3d}. {chord.name:<10} {names:<14} {voiced}")
    print("=" * 60 + "\n")


def main():
    """Main entry point."""
    args = parse_arguments()

    if args.detect:
        run_detection(args.detect)
        return 0

    try:
        run_session(args)
    except EmptyChordPoolError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Session generation failed: {str(e)}", exc_info=True)
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
