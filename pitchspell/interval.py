import collections
import operator
import re

import music21.interval

from pitchspell.constants import (
    AUGMENTED,
    DIMINISHED,
    MAJOR,
    MINOR,
    PERFECT,
)
from pitchspell.diatonic import diatonic_to_semitones, is_perfect_step
from pitchspell.errors import ParseError

IntervalCoord = collections.namedtuple("IntervalCoord", ["diatonic", "semitones"])

# quality letters, then the 1-based generic number (1 = unison, 8 = octave)
_NAME_REGEX = re.compile(r"(P|M|m|A+|d+)([1-9][0-9]*)")


def quality_label(diatonic: int, offset: int) -> str:
    """
    Conventional quality label for a letter span and its quality offset.

    Perfect-class spans (unison, fourth, fifth) go P → d, dd, … below the
    natural size; imperfect-class spans go M → m → d, dd, …. Both classes
    read A, AA, … above it.
    """
    if offset > 0:
        return AUGMENTED * offset
    if is_perfect_step(diatonic):
        return PERFECT if offset == 0 else DIMINISHED * -offset
    if offset == 0:
        return MAJOR
    if offset == -1:
        return MINOR
    return DIMINISHED * (-offset - 1)


def _offset_from_quality(quality: str, diatonic: int):
    """Inverse of :func:`quality_label`; None when the quality cannot apply."""
    perfect = is_perfect_step(diatonic)
    first = quality[0]
    if first == AUGMENTED:
        return len(quality)
    if first == DIMINISHED:
        return -len(quality) if perfect else -len(quality) - 1
    if first == PERFECT:
        return 0 if perfect else None
    if first == MAJOR:
        return None if perfect else 0
    if first == MINOR:
        return None if perfect else -1
    return None


class Interval:
    """
    Directed distance between two pitches as a (diatonic, semitones) pair.

    ``Interval(start, end)`` subtracts the start coordinate from the end one;
    the sign follows that order, so a falling interval has negative parts.
    """

    __slots__ = ("_coord",)

    def __init__(self, start, end):
        self._coord = IntervalCoord(end.diatonic() - start.diatonic(),
                                    end.semitones() - start.semitones())

    @classmethod
    def from_coord(cls, coord):
        interval = cls.__new__(cls)
        diatonic, semitones = coord
        interval._coord = IntervalCoord(operator.index(diatonic), operator.index(semitones))
        return interval

    @classmethod
    def from_name(cls, name: str):
        """
        Parse an ascending interval name such as ``"M3"``, ``"P8"`` or
        ``"dd4"``. Raises ParseError for malformed names, for qualities
        the interval class does not admit (``"P3"``, ``"M5"``) and for
        diminished unisons (``"d1"``), which would fall below the start.
        """
        parsed = _NAME_REGEX.fullmatch(name) if isinstance(name, str) else None
        if not parsed:
            raise ParseError(name, kind="interval name")
        quality, number = parsed.groups()
        diatonic = int(number) - 1
        offset = _offset_from_quality(quality, diatonic)
        if offset is None or (diatonic == 0 and offset < 0):
            raise ParseError(name, kind="interval name")
        return cls.from_coord((diatonic, diatonic_to_semitones(diatonic) + offset))

    @classmethod
    def from_music21(cls, m21_interval):
        directed = m21_interval.generic.directed
        diatonic = directed - 1 if directed > 0 else directed + 1
        semitones = m21_interval.chromatic.semitones
        if not float(semitones).is_integer():
            raise ValueError(f"Cannot represent microtonal interval {m21_interval!r}")
        return cls.from_coord((diatonic, int(semitones)))

    # ── Accessors ───────────────────────────────────────────────────────────

    def coord(self) -> IntervalCoord:
        return self._coord

    def diatonic(self) -> int:
        return self._coord.diatonic

    def semitones(self) -> int:
        return self._coord.semitones

    def quality_offset(self) -> int:
        """Semitones by which this interval differs from its natural size."""
        return self.semitones() - diatonic_to_semitones(self.diatonic())

    def is_perfect(self) -> bool:
        return is_perfect_step(self.diatonic())

    def quality(self) -> str:
        return quality_label(self.diatonic(), self.quality_offset())

    def number(self) -> int:
        """Signed generic number: 1 for a unison, 3 for a third, -3 falling."""
        diatonic = self.diatonic()
        return diatonic + 1 if diatonic >= 0 else diatonic - 1

    def is_descending(self) -> bool:
        diatonic, semitones = self._coord
        return diatonic < 0 or (diatonic == 0 and semitones < 0)

    def name(self) -> str:
        """
        Quality and size, e.g. ``"M3"`` or ``"AA19"``. Falling intervals are
        named after their rising mirror, so E4 → C4 is ``"M3"``.
        """
        ascending = abs(self)
        return f"{ascending.quality()}{ascending.number()}"

    def to_music21(self):
        ascending = abs(self)
        diatonic = music21.interval.DiatonicInterval(ascending.quality(), self.number())
        chromatic = music21.interval.ChromaticInterval(self.semitones())
        return music21.interval.Interval(diatonic=diatonic, chromatic=chromatic)

    # ── Arithmetic ──────────────────────────────────────────────────────────

    def __add__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.from_coord((self.diatonic() + other.diatonic(),
                                    self.semitones() + other.semitones()))

    def __neg__(self):
        return Interval.from_coord((-self.diatonic(), -self.semitones()))

    def __abs__(self):
        return -self if self.is_descending() else self

    # ── Value-object protocol ───────────────────────────────────────────────

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self._coord == other._coord

    def __hash__(self):
        return hash(self._coord)

    def __repr__(self):
        return f"Interval.from_coord({tuple(self._coord)!r})"

    def __str__(self):
        return self.name()
