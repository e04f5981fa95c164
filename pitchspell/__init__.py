from pitchspell.errors import ParseError, PitchspellError
from pitchspell.interval import Interval, IntervalCoord
from pitchspell.pitch import Pitch, PitchCoord

__all__ = [
    "Interval",
    "IntervalCoord",
    "ParseError",
    "Pitch",
    "PitchCoord",
    "PitchspellError",
]
