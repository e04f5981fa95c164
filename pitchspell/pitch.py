import collections
import operator
import re

import music21.pitch

from pitchspell.constants import (
    DEFAULT_OCTAVE,
    DIATONICS_PER_OCTAVE,
    FLAT,
    PITCH_NAMES,
    SEMITONES_PER_OCTAVE,
    SHARP,
    _ACCIDENTAL_OFFSETS,
    _LETTER_TO_STEP,
)
from pitchspell.diatonic import (
    diatonic_octave,
    diatonic_to_semitones,
    natural_semitones,
    semitones_to_nearest_diatonic,
    simplify_diatonic,
)
from pitchspell.errors import ParseError
from pitchspell.interval import Interval

PitchCoord = collections.namedtuple("PitchCoord", ["diatonic", "semitones"])

# letter, accidentals, optional signed octave
_SPN_REGEX = re.compile(r"([A-Ga-g])([b#x]*)(-?[0-9]+)?")

# music21 writes the octave-0 C as ps 12; this package counts C0 as 0.
_M21_PS_OFFSET = 12


def _offset_from_accidental(accidental: str) -> int:
    """Sum the per-character offsets of an accidental string (b=-1, #=+1, x=+2)."""
    return sum(_ACCIDENTAL_OFFSETS.get(ch, 0) for ch in accidental)


def _coord_from_spn(spn: str) -> PitchCoord:
    if not isinstance(spn, str):
        raise ParseError(spn)
    parsed = _SPN_REGEX.fullmatch(spn)
    if not parsed:
        raise ParseError(spn)

    letter, accidental, octave = parsed.groups()
    octave_num = int(octave) if octave is not None else DEFAULT_OCTAVE
    step = _LETTER_TO_STEP[letter.upper()]
    diatonic = step + octave_num * DIATONICS_PER_OCTAVE
    semitones = (natural_semitones(step)
                 + octave_num * SEMITONES_PER_OCTAVE
                 + _offset_from_accidental(accidental))
    return PitchCoord(diatonic, semitones)


def _coord_from_semitones(semitones: int) -> PitchCoord:
    return PitchCoord(semitones_to_nearest_diatonic(semitones), semitones)


class Pitch:
    """
    A spelled pitch stored as a (diatonic, semitones) coordinate.

    Build it from exactly one source::

        Pitch((29, 50))         # explicit coordinate (D4)
        Pitch(semitones=49)     # nearest spelling, C#4
        Pitch(spn="Dbb4")       # scientific pitch notation
        Pitch()                 # C0, coordinate (0, 0)

    Supplying more than one source raises ``TypeError``, as does a
    non-integer coordinate or semitone count (``1.5`` is never truncated).
    """

    __slots__ = ("_coord",)

    def __init__(self, coord=None, *, semitones=None, spn=None):
        supplied = [name for name, value in
                    (("coord", coord), ("semitones", semitones), ("spn", spn))
                    if value is not None]
        if len(supplied) > 1:
            raise TypeError(
                f"Pitch() takes exactly one of coord, semitones or spn; "
                f"got {', '.join(supplied)}"
            )

        if spn is not None:
            self._coord = _coord_from_spn(spn)
        elif semitones is not None:
            self._coord = _coord_from_semitones(operator.index(semitones))
        elif coord is not None:
            diatonic, semis = coord
            self._coord = PitchCoord(operator.index(diatonic), operator.index(semis))
        else:
            self._coord = PitchCoord(0, 0)

    # ── Alternative constructors ────────────────────────────────────────────

    @classmethod
    def from_coord(cls, coord):
        return cls(coord)

    @classmethod
    def from_semitones(cls, semitones: int):
        return cls(semitones=semitones)

    @classmethod
    def from_spn(cls, spn: str):
        return cls(spn=spn)

    @classmethod
    def from_music21(cls, m21_pitch):
        """
        Build a Pitch from a ``music21.pitch.Pitch``, keeping its spelling.

        A pitch without an explicit octave takes music21's implicit octave
        (4). Microtonal pitches are rejected with ``ValueError``.
        """
        ps = m21_pitch.ps
        if not float(ps).is_integer():
            raise ValueError(f"Cannot represent microtonal pitch {m21_pitch!r}")
        return cls((m21_pitch.diatonicNoteNum - 1, int(ps) - _M21_PS_OFFSET))

    # ── Accessors ───────────────────────────────────────────────────────────

    def coord(self) -> PitchCoord:
        return self._coord

    def diatonic(self) -> int:
        return self._coord.diatonic

    def semitones(self) -> int:
        return self._coord.semitones

    def simple_diatonic(self) -> int:
        return simplify_diatonic(self.diatonic())

    def octave(self) -> int:
        return diatonic_octave(self.diatonic())

    def letter(self) -> str:
        return PITCH_NAMES[self.simple_diatonic()]

    def accidental_offset(self) -> int:
        """Semitones above (positive) or below the unaltered letter."""
        return self.semitones() - diatonic_to_semitones(self.diatonic())

    def accidental(self) -> str:
        offset = self.accidental_offset()
        if offset < 0:
            return FLAT * -offset
        if offset > 0:
            return SHARP * offset
        return ""

    def name(self) -> str:
        return f"{self.letter()}{self.accidental()}"

    def spn(self) -> str:
        """Scientific pitch notation, e.g. ``"F#6"``."""
        return f"{self.letter()}{self.accidental()}{self.octave()}"

    # ── Relations ───────────────────────────────────────────────────────────

    def is_enharmonic(self, other) -> bool:
        """Same sounding pitch, regardless of spelling."""
        return self.semitones() == other.semitones()

    def transpose(self, interval):
        """Return the pitch reached by moving ``interval`` from this one."""
        diatonic, semitones = interval.coord()
        return Pitch((self.diatonic() + diatonic, self.semitones() + semitones))

    def interval_to(self, other):
        return Interval(self, other)

    def to_music21(self):
        """
        Convert to ``music21.pitch.Pitch``. music21 raises its own error for
        more than four sharps or flats.
        """
        offset = self.accidental_offset()
        return music21.pitch.Pitch(
            step=self.letter(),
            accidental=offset if offset else None,
            octave=self.octave(),
        )

    # ── Value-object protocol ───────────────────────────────────────────────

    def __eq__(self, other):
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._coord == other._coord

    def __hash__(self):
        return hash(self._coord)

    def __repr__(self):
        return f"Pitch(spn={self.spn()!r})"

    def __str__(self):
        return self.spn()
