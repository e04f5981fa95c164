"""
Conversions between diatonic step counts and semitone counts.

A diatonic value counts letter steps from C0 (C0 = 0, D0 = 1, … C1 = 7); it
may span many octaves and may be negative. All octave folding uses floor
division, so -1 is B in octave -1 rather than a "negative C".
"""
import numpy as np

from pitchspell.constants import (
    DIATONICS_PER_OCTAVE,
    SEMITONES_PER_OCTAVE,
    _NATURAL_SEMITONES,
    _PERFECT_STEPS,
)

_NATURAL_SEMITONES_ARRAY = np.array(_NATURAL_SEMITONES, dtype=np.int64)


def simplify_diatonic(diatonic: int) -> int:
    """Fold a diatonic value into its step class 0..6 (C..B)."""
    return diatonic % DIATONICS_PER_OCTAVE


def diatonic_octave(diatonic: int) -> int:
    return diatonic // DIATONICS_PER_OCTAVE


def natural_semitones(step: int) -> int:
    """Semitone offset of an unaltered step class within its octave."""
    return _NATURAL_SEMITONES[simplify_diatonic(step)]


def diatonic_to_semitones(diatonic: int) -> int:
    """
    Natural semitone count spanned by ``diatonic`` letter steps.

    Works for compound and negative spans: 9 (a tenth) → 16, and -2 (the A
    below C0) → -3.
    """
    octave, step = divmod(diatonic, DIATONICS_PER_OCTAVE)
    return octave * SEMITONES_PER_OCTAVE + _NATURAL_SEMITONES[step]


def semitones_to_nearest_diatonic(semitones: int) -> int:
    """
    Diatonic step whose natural semitone value is closest to ``semitones``.

    The search stays inside the octave of ``semitones``; a tie between two
    neighbouring steps resolves to the lower one, so black keys spell as
    sharps (1 → C, 6 → F).
    """
    octave, pc = divmod(semitones, SEMITONES_PER_OCTAVE)
    # min() keeps the first of equal candidates, i.e. the lower step.
    step = min(range(DIATONICS_PER_OCTAVE),
               key=lambda i: abs(_NATURAL_SEMITONES[i] - pc))
    return octave * DIATONICS_PER_OCTAVE + step


def is_perfect_step(diatonic: int) -> bool:
    """True for unison, fourth and fifth spans and their compounds."""
    return simplify_diatonic(diatonic) in _PERFECT_STEPS


# ── Batch forms ───────────────────────────────────────────────────────────────

def diatonic_to_semitones_array(diatonics):
    """Vectorised :func:`diatonic_to_semitones` for any array-like of ints."""
    d = np.asarray(diatonics, dtype=np.int64)
    return (np.floor_divide(d, DIATONICS_PER_OCTAVE) * SEMITONES_PER_OCTAVE
            + _NATURAL_SEMITONES_ARRAY[np.mod(d, DIATONICS_PER_OCTAVE)])


def semitones_to_nearest_diatonic_array(semitones):
    """Vectorised :func:`semitones_to_nearest_diatonic`, same tie-break."""
    s = np.asarray(semitones, dtype=np.int64)
    octave = np.floor_divide(s, SEMITONES_PER_OCTAVE)
    pc = np.mod(s, SEMITONES_PER_OCTAVE)
    # argmin returns the first minimum, matching the scalar tie-break.
    distances = np.abs(pc[..., np.newaxis] - _NATURAL_SEMITONES_ARRAY)
    step = np.argmin(distances, axis=-1)
    return octave * DIATONICS_PER_OCTAVE + step
