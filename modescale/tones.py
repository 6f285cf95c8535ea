import collections

from modescale.constants import _LETTERS, FLAT, SHARP

Tone = collections.namedtuple("Tone", ["letter", "accidentals"])


class InvalidInput(ValueError):
    """Raised when a note name cannot be parsed into a Tone."""


def parse_tone(text):
    """
    Parse a note name such as "C", "g#", "Abbb" or "F##" into a Tone.

    The letter is case-insensitive; the accidental run is not ("B" is never
    a flat). Every character after the letter must be the same accidental.

    Returns:
        Tone: letter uppercased, accidentals = +n for n sharps, -n for n flats.

    Raises:
        InvalidInput: empty text, unknown letter, or a bad/mixed accidental run.
    """
    if not isinstance(text, str) or not text:
        raise InvalidInput(f"Empty note name: {text!r}")

    letter = text[0].upper()
    if letter not in _LETTERS:
        raise InvalidInput(f"Unknown note letter in {text!r}")

    if len(text) == 1:
        return Tone(letter, 0)

    accidental = text[1]
    if accidental not in (SHARP, FLAT):
        raise InvalidInput(f"Expected '#' or 'b' after the letter in {text!r}")
    if any(ch != accidental for ch in text[2:]):
        raise InvalidInput(f"Mixed accidentals in {text!r}")

    count = len(text) - 1
    return Tone(letter, -count if accidental == FLAT else count)


def format_tone(tone) -> str:
    """Render a Tone back to its note name, e.g. Tone("E", -2) → "Ebb"."""
    if tone.accidentals > 0:
        return tone.letter + SHARP * tone.accidentals
    if tone.accidentals < 0:
        return tone.letter + FLAT * -tone.accidentals
    return tone.letter
