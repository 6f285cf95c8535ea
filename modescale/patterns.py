import numpy as np

from modescale.constants import _BASE_PATTERNS, _MODE_NAMES, _TONIC_INDEX


def normalize_mode(mode: int) -> int:
    """Wrap any integer mode number cyclically into 1..7 (8 → 1, 0 → 7, -1 → 6)."""
    return ((int(mode) - 1) % 7 + 7) % 7 + 1


def _check_family(family: str) -> None:
    if family not in _BASE_PATTERNS:
        raise ValueError(f"Unsupported scale family: {family}")


def select_pattern(family: str, mode: int) -> tuple[int, ...]:
    """
    Return the 7-step semitone pattern of `mode` within the parent `family`.

    Mode N starts the parent pattern on its Nth degree and wraps around, so
    mode 2 of the major family is the Dorian pattern (2, 1, 2, 2, 2, 1, 2).

    Args:
        family (str): MAJOR, MELODIC_MINOR or HARMONIC_MINOR.
        mode (int): any integer; normalized with normalize_mode.

    Returns:
        tuple[int, ...]: seven steps, each 1, 2 or 3, summing to 12.
    """
    _check_family(family)
    shift = (_TONIC_INDEX[family] + normalize_mode(mode) - 1) % 7
    rotated = np.roll(np.array(_BASE_PATTERNS[family], dtype=np.int64), -shift)
    return tuple(int(step) for step in rotated)


def mode_name(family: str, mode: int) -> str:
    """Conventional name of a mode, e.g. mode_name(MAJOR, 2) → "Dorian"."""
    _check_family(family)
    return _MODE_NAMES[family][normalize_mode(mode) - 1]
