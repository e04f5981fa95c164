# ── Octave geometry ───────────────────────────────────────────────────────────

DIATONICS_PER_OCTAVE = 7
SEMITONES_PER_OCTAVE = 12
# Octave assumed when an SPN string carries no octave digits ("C#" → "C#4").
DEFAULT_OCTAVE = 4

# ── Letter / step lookup tables ───────────────────────────────────────────────

PITCH_NAMES = "CDEFGAB"
_LETTER_TO_STEP: dict[str, int] = {
    "C": 0, "D": 1, "E": 2, "F": 3, "G": 4, "A": 5, "B": 6,
}
# Natural (major-scale) semitone offset for each simple diatonic step C..B.
_NATURAL_SEMITONES: list[int] = [0, 2, 4, 5, 7, 9, 11]

# ── Accidentals ───────────────────────────────────────────────────────────────

_ACCIDENTAL_OFFSETS: dict[str, int] = {"b": -1, "#": 1, "x": 2}
FLAT = "b"
SHARP = "#"

# ── Interval qualities ────────────────────────────────────────────────────────

# Unison, fourth and fifth (and their compounds) are perfect-class.
_PERFECT_STEPS = frozenset({0, 3, 4})

PERFECT = "P"
MAJOR = "M"
MINOR = "m"
AUGMENTED = "A"
DIMINISHED = "d"
