#!/usr/bin/env python3
"""
scripts/mode_table.py — print every mode of every parent scale for one root.

    [Family]  |  [Mode]  [Name]  |  notes  |  steps

Useful for eyeballing spellings of unusual roots (double sharps, Fb, Cb ...):
each row must use the letters A-G exactly once.

Usage:
    python scripts/mode_table.py
    python scripts/mode_table.py --root Ebb
    python scripts/mode_table.py --root B# --family harmonic_minor
"""
import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from modescale.constants import FAMILIES, FLATS, SHARPS
from modescale.patterns import mode_name, select_pattern
from modescale.scale_builder import build_scale, render_scale
from modescale.tones import InvalidInput, parse_tone

# ── ANSI colours ──────────────────────────────────────────────────────────────
BOLD  = "\033[1m"
CYAN  = "\033[96m"
YELL  = "\033[93m"
DIM   = "\033[2m"
RESET = "\033[0m"

_STEP_SYMBOLS = {1: "H", 2: "W", 3: "W+H"}


def _colour_notes(rendered: str) -> str:
    """Highlight double (or heavier) accidentals."""
    out = []
    for name in rendered.split():
        if len(name) > 2:
            out.append(f"{YELL}{name}{RESET}")
        else:
            out.append(name)
    return " ".join(out)


def print_family(root, family: str, prefer: str) -> None:
    print(f"\n{BOLD}{CYAN}{family.replace('_', ' ').title()}{RESET}")
    print(f"  {'Mode':>4}  {'Name':<19}  {'Notes':<28}  Steps")
    print(f"  {'─'*4}  {'─'*19}  {'─'*28}  {'─'*20}")
    for mode in range(1, 8):
        pattern = select_pattern(family, mode)
        rendered = render_scale(build_scale(root, pattern, prefer))
        steps = "-".join(_STEP_SYMBOLS[s] for s in pattern)
        pad = 28 - len(rendered)
        print(f"  {mode:>4}  {mode_name(family, mode):<19}  "
              f"{_colour_notes(rendered)}{' ' * max(pad, 0)}  {DIM}{steps}{RESET}")


def main():
    parser = argparse.ArgumentParser(description="Print all seven modes of each parent scale.")
    parser.add_argument("--root", type=str, default="C", help="Root note (default: C)")
    parser.add_argument("--family", choices=FAMILIES, default=None,
                        help="Only show this parent scale")
    parser.add_argument("--prefer-flats", action="store_true",
                        help="Spell tritone-distant steps with flats")
    args = parser.parse_args()

    try:
        root = parse_tone(args.root)
    except InvalidInput as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    prefer = FLATS if args.prefer_flats else SHARPS
    families = [args.family] if args.family else list(FAMILIES)
    for family in families:
        print_family(root, family, prefer)
    print()


if __name__ == "__main__":
    main()
