# ── Letter and half-step lookup tables ────────────────────────────────────────

# Natural letters in the order a scale walks through them (G wraps to A).
_LETTERS: str = "ABCDEFG"

# Natural letter → position on the C-based 12-step lattice.
# E→F and B→C are the two half steps.
_LETTER_TO_PC: dict[str, int] = {
    "C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11,
}

SHARP = "#"
FLAT = "b"

# ── Scale families ────────────────────────────────────────────────────────────

MAJOR = "major"
MELODIC_MINOR = "melodic_minor"
HARMONIC_MINOR = "harmonic_minor"

FAMILIES: tuple[str, ...] = (MAJOR, MELODIC_MINOR, HARMONIC_MINOR)

# Stored step patterns (whole=2, half=1, augmented second=3).
# The two minor patterns are stored from the third degree of the minor scale.
_BASE_PATTERNS: dict[str, tuple[int, ...]] = {
    MAJOR:          (2, 2, 1, 2, 2, 2, 1),
    HARMONIC_MINOR: (2, 2, 1, 3, 1, 2, 1),
    MELODIC_MINOR:  (2, 2, 2, 2, 1, 2, 1),
}
# Stored index at which mode 1 (the family's own tonic) begins.
_TONIC_INDEX: dict[str, int] = {
    MAJOR: 0,
    HARMONIC_MINOR: 5,
    MELODIC_MINOR: 5,
}

# Mode number (1-7) → conventional name, per family.
_MODE_NAMES: dict[str, tuple[str, ...]] = {
    MAJOR: (
        "Ionian", "Dorian", "Phrygian", "Lydian",
        "Mixolydian", "Aeolian", "Locrian",
    ),
    MELODIC_MINOR: (
        "Melodic minor", "Dorian b2", "Lydian augmented", "Lydian dominant",
        "Mixolydian b6", "Locrian #2", "Altered",
    ),
    HARMONIC_MINOR: (
        "Harmonic minor", "Locrian #6", "Ionian #5", "Dorian #4",
        "Phrygian dominant", "Lydian #2", "Ultralocrian",
    ),
}

# ── Accidental tie-break policies ─────────────────────────────────────────────

SHARPS = "sharps"
FLATS = "flats"
