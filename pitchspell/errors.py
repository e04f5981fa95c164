class PitchspellError(Exception):
    """Base class for errors raised by pitchspell."""


class ParseError(PitchspellError, ValueError):
    """
    Raised when a scientific-pitch-notation string or an interval name does
    not match its grammar. The offending input is kept on ``.text``.

    An SPN octave must have at least one digit after an optional minus sign,
    so ``"C-"`` is refused rather than read as an empty octave.
    """

    def __init__(self, text, kind="scientific pitch notation"):
        self.text = text
        self.kind = kind
        super().__init__(f"Cannot parse invalid {kind}: {text!r}")
