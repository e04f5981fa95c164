"""
pitchspell command line.

Usage:
    pitchspell pitch F#6 Dbb4          # coordinate, letter, accidental, octave
    pitchspell semitones 49 54         # spell raw semitone counts (C0 = 0)
    pitchspell interval G4 Cbb5        # coordinate, offset, quality, name
"""
import argparse
import sys

from pitchspell.errors import PitchspellError
from pitchspell.interval import Interval
from pitchspell.pitch import Pitch


def _describe_pitch(pitch: Pitch) -> str:
    diatonic, semitones = pitch.coord()
    return (f"{pitch.spn():<8} coord=({diatonic}, {semitones})  "
            f"letter={pitch.letter()}  accidental={pitch.accidental() or '-'}  "
            f"octave={pitch.octave()}")


def cmd_pitch(args):
    for spn in args.spn:
        print(_describe_pitch(Pitch(spn=spn)))


def cmd_semitones(args):
    for n in args.semitones:
        print(f"{n:>5}  →  {_describe_pitch(Pitch(semitones=n))}")


def cmd_interval(args):
    start, end = Pitch(spn=args.start), Pitch(spn=args.end)
    interval = Interval(start, end)
    diatonic, semitones = interval.coord()
    print(f"{start.spn()} → {end.spn()}")
    print(f"  coord          ({diatonic}, {semitones})")
    print(f"  quality offset {interval.quality_offset()}")
    print(f"  quality        {interval.quality()}")
    print(f"  name           {interval.name()}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pitchspell",
        description="Spell pitches and name the intervals between them.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("pitch", help="Describe pitches given in scientific pitch notation")
    p.add_argument("spn", nargs="+", help="e.g. C4, F#6, Dbb4, Bx")
    p.set_defaults(func=cmd_pitch)

    p = sub.add_parser("semitones", help="Spell raw semitone counts (C0 = 0)")
    p.add_argument("semitones", nargs="+", type=int)
    p.set_defaults(func=cmd_semitones)

    p = sub.add_parser("interval", help="Measure the interval from START to END")
    p.add_argument("start", help="Start pitch, e.g. C4")
    p.add_argument("end", help="End pitch, e.g. F#6")
    p.set_defaults(func=cmd_interval)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except PitchspellError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
