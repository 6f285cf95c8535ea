"""
Bridge between modescale tones and music21 pitches.

music21 spells flats with '-' and supports up to quadruple accidentals, so
tones beyond ±4 cannot be converted.
"""
import music21

_MAX_MUSIC21_ACCIDENTALS = 4


def tone_to_pitch(tone, octave=None):
    """Convert a Tone to a music21 Pitch, optionally pinned to an octave."""
    if abs(tone.accidentals) > _MAX_MUSIC21_ACCIDENTALS:
        raise ValueError(
            f"music21 cannot spell {tone.letter} with {tone.accidentals:+d} accidentals"
        )
    modifier = "#" * tone.accidentals if tone.accidentals > 0 else "-" * -tone.accidentals
    pitch = music21.pitch.Pitch(tone.letter + modifier)
    if octave is not None:
        pitch.octave = octave
    return pitch


def scale_to_pitches(scale, octave=4):
    """
    Ascending music21 pitches for a scale, root in `octave`.

    The octave number follows the letter (music21 convention), so it goes up
    each time the letters wrap from B to C.
    """
    pitches = []
    for i, tone in enumerate(scale):
        if i > 0 and tone.letter == "C":
            octave += 1
        pitches.append(tone_to_pitch(tone, octave))
    return pitches


def midi_numbers(scale, octave=4) -> list[int]:
    """MIDI note numbers of scale_to_pitches (C4 = 60).

    Raises ValueError if any note falls outside MIDI's 0-127 range
    (music21's Pitch.midi would wrap it by octaves).
    """
    numbers = []
    for p in scale_to_pitches(scale, octave):
        if not 0 <= p.ps <= 127:
            raise ValueError(f"{p.nameWithOctave} is outside the MIDI range 0-127")
        numbers.append(int(p.ps))
    return numbers
