"""
Command-line front end: print the notes of a mode.

Usage:
    modescale                               # C Ionian
    modescale -r G# -m 6 -s                 # G# A# B C# D# E F#
    modescale -r C --harmonic-minor -s      # C D Eb F G Ab B
    modescale -r Eb -m 2 --melodic-minor -v # with step trace
"""
import argparse
import json
import sys

from modescale.constants import FLATS, HARMONIC_MINOR, MAJOR, MELODIC_MINOR, SHARPS
from modescale.interop import midi_numbers
from modescale.patterns import mode_name, normalize_mode, select_pattern
from modescale.scale_builder import build_scale, print_scale_trace, render_scale
from modescale.tones import InvalidInput, format_tone, parse_tone


def _parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Spell the seven notes of a diatonic mode.")
    p.add_argument("-r", "--root", type=str, default="C",
                   help="Root note, e.g. C, F#, Bbb (default: C)")
    p.add_argument("-m", "--mode", type=int, default=1,
                   help="Mode number; wraps cyclically, so 8 == 1 and 0 == 7 (default: 1)")
    family = p.add_mutually_exclusive_group()
    family.add_argument("--melodic-minor", action="store_true",
                        help="Take the mode from the melodic minor scale")
    family.add_argument("--harmonic-minor", action="store_true",
                        help="Take the mode from the harmonic minor scale")
    p.add_argument("-s", "--as-string", action="store_true",
                   help="Print the notes as one space-separated string instead of JSON")
    p.add_argument("--prefer-flats", action="store_true",
                   help="Spell tritone-distant steps with flats instead of sharps")
    p.add_argument("--midi", type=int, default=None, metavar="OCTAVE",
                   help="Also print MIDI note numbers, root in this octave")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Print the mode name and spelling trace")
    return p.parse_args(argv)


def _family_from_args(args) -> str:
    if args.melodic_minor:
        return MELODIC_MINOR
    if args.harmonic_minor:
        return HARMONIC_MINOR
    return MAJOR


def main(argv=None) -> int:
    args = _parse_args(argv)
    family = _family_from_args(args)
    prefer = FLATS if args.prefer_flats else SHARPS

    try:
        root = parse_tone(args.root)
    except InvalidInput as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    pattern = select_pattern(family, args.mode)
    scale = build_scale(root, pattern, prefer)

    midi = None
    if args.midi is not None:
        try:
            midi = midi_numbers(scale, args.midi)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if args.verbose:
        print(f"{format_tone(root)} {mode_name(family, args.mode)} "
              f"(mode {normalize_mode(args.mode)} of {family.replace('_', ' ')})")
        print_scale_trace(scale, pattern)

    if args.as_string:
        print(render_scale(scale))
    else:
        print(json.dumps([
            {"letter": t.letter, "accidentals": t.accidentals, "name": format_tone(t)}
            for t in scale
        ]))

    if midi is not None:
        print(" ".join(str(n) for n in midi))
    return 0


if __name__ == "__main__":
    sys.exit(main())
