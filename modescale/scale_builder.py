from modescale.constants import _LETTERS, _LETTER_TO_PC, FLATS, MAJOR, SHARPS
from modescale.patterns import select_pattern
from modescale.tones import Tone, format_tone, parse_tone

_SCALE_LENGTH = 7


def _next_letter(letter: str) -> str:
    return _LETTERS[(_LETTERS.index(letter) + 1) % len(_LETTERS)]


def _pitch_class(tone) -> int:
    """Position of a tone on the 12-step lattice (0-11), accidentals applied."""
    return (_LETTER_TO_PC[tone.letter] + tone.accidentals) % 12


def _resolve_accidentals(letter: str, target_pc: int, prefer: str = SHARPS) -> int:
    """
    Smallest accidental offset that puts `letter` on `target_pc`.

    Searches outward from 0; at each magnitude j tries +j before -j
    (or -j before +j when prefer=FLATS). Only j=6 can match both ways.
    """
    if prefer not in (SHARPS, FLATS):
        raise ValueError(f"Unsupported accidental preference: {prefer}")
    natural = _LETTER_TO_PC[letter]
    for j in range(0, 7):
        candidates = (j, -j) if prefer == SHARPS else (-j, j)
        for offset in candidates:
            if (natural + offset - target_pc) % 12 == 0:
                return offset
    raise ValueError(f"No spelling of {letter} reaches pitch class {target_pc}")


def build_scale(root, pattern, prefer: str = SHARPS) -> list:
    """
    Spell the 7 tones of a scale starting at `root` and following `pattern`.

    Each tone takes the next natural letter after the previous one, so the
    seven letters A-G each appear exactly once. Its accidentals are whatever
    moves that letter onto the pitch `pattern` asks for.

    Args:
        root (Tone): first tone; kept as given, including large accidentals.
        pattern (sequence[int]): 7 semitone steps; only the first 6 are walked.
        prefer (str): SHARPS or FLATS, breaks the tritone (±6) tie.

    Returns:
        list[Tone]: exactly 7 tones, root first.
    """
    scale = [None] * _SCALE_LENGTH
    scale[0] = Tone(root.letter, root.accidentals)
    for i in range(1, _SCALE_LENGTH):
        prev = scale[i - 1]
        letter = _next_letter(prev.letter)
        target_pc = (_pitch_class(prev) + pattern[i - 1]) % 12
        scale[i] = Tone(letter, _resolve_accidentals(letter, target_pc, prefer))
    return scale


def compute_scale(root: str, mode: int = 1, family: str = MAJOR, prefer: str = SHARPS) -> list:
    """Parse `root`, pick the mode's step pattern and spell the scale.

    Raises InvalidInput for an unparseable root.
    """
    tone = parse_tone(root)
    return build_scale(tone, select_pattern(family, mode), prefer)


def render_scale(scale) -> str:
    """Space-separated note names, e.g. "C D Eb F G Ab B"."""
    return " ".join(format_tone(t) for t in scale)


def scale_steps(scale) -> list[int]:
    """Semitone distance (1-11) between each pair of consecutive tones."""
    return [
        (_pitch_class(b) - _pitch_class(a)) % 12
        for a, b in zip(scale, scale[1:])
    ]


def print_scale_trace(scale, pattern) -> None:
    """Print how each tone was reached from the one before it."""
    print("\n── Scale Spelling Trace ─────────────────────────────────────────────")
    print(f"   {'From':<7} {'Step':>4}  {'Target pc':>9}  {'To':<7}")
    print(f"   {'─'*7} {'─'*4}  {'─'*9}  {'─'*7}")
    for prev, step, tone in zip(scale, pattern, scale[1:]):
        target = (_pitch_class(prev) + step) % 12
        print(f"   {format_tone(prev):<7} {step:>4}  {target:>9}  {format_tone(tone):<7}")
    print("────────────────────────────────────────────────────────────────────\n")
