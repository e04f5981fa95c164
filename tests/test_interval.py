import unittest
import music21
from pitchspell import Interval, IntervalCoord, ParseError, Pitch
from pitchspell.interval import quality_label


def interval_from_spn_range(start_spn, end_spn):
    return Interval(Pitch(spn=start_spn), Pitch(spn=end_spn))


class TestIntervalCoord(unittest.TestCase):
    def test_coords_from_pitch_range(self):
        for start, end, coord in [
            ("C4", "C4", (0, 0)),
            ("C4", "D4", (1, 2)),
            ("C4", "F#6", (17, 30)),
        ]:
            with self.subTest(start=start, end=end):
                self.assertEqual(interval_from_spn_range(start, end).coord(), coord)

    def test_coord_is_named(self):
        coord = interval_from_spn_range("C4", "F#6").coord()
        self.assertIsInstance(coord, IntervalCoord)
        self.assertEqual((coord.diatonic, coord.semitones), (17, 30))

    def test_descending_coord_is_negative(self):
        self.assertEqual(interval_from_spn_range("E4", "C4").coord(), (-2, -4))

    def test_zero_interval(self):
        for spn in ["C0", "F#6", "Dbb4", "B-1", "Abbbb5"]:
            i = interval_from_spn_range(spn, spn)
            self.assertEqual(i.coord(), (0, 0))
            self.assertEqual(i.quality(), "P")

    def test_coordinate_additivity(self):
        chains = [
            ("C4", "E4", "G#4"),
            ("Bb3", "F4", "Dbb5"),
            ("G4", "C4", "Fx2"),
        ]
        for a, b, c in chains:
            with self.subTest(chain=(a, b, c)):
                p1, p2, p3 = Pitch(spn=a), Pitch(spn=b), Pitch(spn=c)
                first, second = Interval(p1, p2).coord(), Interval(p2, p3).coord()
                total = Interval(p1, p3).coord()
                self.assertEqual((first[0] + second[0], first[1] + second[1]), tuple(total))
                self.assertEqual(Interval(p1, p2) + Interval(p2, p3), Interval(p1, p3))


class TestIntervalQuality(unittest.TestCase):
    def test_quality_offsets(self):
        for start, end, offset in [
            ("C4", "C4", 0),
            ("C4", "Cx4", 2),
            ("C4", "Dbb4", -2),
            ("Bb3", "D#4", 1),
            ("D4", "Fbb4", -3),
        ]:
            with self.subTest(start=start, end=end):
                self.assertEqual(interval_from_spn_range(start, end).quality_offset(), offset)

    def test_qualities(self):
        for start, end, quality in [
            ("E2", "Bx", "AA"),
            ("E2", "Bx4", "AA"),
            ("C4", "Fx4", "AA"),
            ("G4", "D#5", "A"),
            ("C4", "A4", "M"),
            ("Bb3", "Dbb4", "d"),
            ("D4", "Fb4", "d"),
            ("G4", "Cbb5", "dd"),
            ("F4", "Abbbb5", "ddd"),
        ]:
            with self.subTest(start=start, end=end):
                self.assertEqual(interval_from_spn_range(start, end).quality(), quality)

    def test_perfect_class_labels(self):
        # fourth: natural size 5 semitones
        labels = [Interval.from_coord((3, 5 + k)).quality() for k in range(-3, 4)]
        self.assertEqual(labels, ["ddd", "dd", "d", "P", "A", "AA", "AAA"])

    def test_imperfect_class_labels(self):
        # third: natural size 4 semitones
        labels = [Interval.from_coord((2, 4 + k)).quality() for k in range(-4, 4)]
        self.assertEqual(labels, ["ddd", "dd", "d", "m", "M", "A", "AA", "AAA"])

    def test_quality_label_directly(self):
        self.assertEqual(quality_label(7, 0), "P")
        self.assertEqual(quality_label(6, -1), "m")
        self.assertEqual(quality_label(6, -2), "d")
        self.assertEqual(quality_label(4, -1), "d")

    def test_compound_intervals(self):
        self.assertEqual(interval_from_spn_range("C4", "C5").quality(), "P")
        self.assertEqual(interval_from_spn_range("C4", "E5").quality(), "M")
        self.assertEqual(interval_from_spn_range("C4", "F#6").quality(), "A")

    def test_descending_intervals_use_floor_mod(self):
        # C5 -> C4: (-7, -12) is a perfect octave down
        self.assertEqual(interval_from_spn_range("C5", "C4").quality(), "P")
        # G4 -> C4: (-4, -7); -4 folds to step 3 with natural size -7
        self.assertEqual(interval_from_spn_range("G4", "C4").quality_offset(), 0)
        self.assertEqual(interval_from_spn_range("G4", "C4").quality(), "P")
        # E4 -> C4: (-2, -4); -2 folds to a sixth class one octave down,
        # whose natural size is -3, so the offset is -1
        falling_third = interval_from_spn_range("E4", "C4")
        self.assertEqual(falling_third.quality_offset(), -1)
        self.assertEqual(falling_third.quality(), "m")
        self.assertFalse(falling_third.is_perfect())

    def test_is_perfect(self):
        self.assertTrue(Interval.from_coord((0, 0)).is_perfect())
        self.assertTrue(Interval.from_coord((11, 19)).is_perfect())
        self.assertFalse(Interval.from_coord((5, 9)).is_perfect())


class TestIntervalNames(unittest.TestCase):
    def test_number(self):
        self.assertEqual(Interval.from_coord((0, 0)).number(), 1)
        self.assertEqual(Interval.from_coord((2, 4)).number(), 3)
        self.assertEqual(Interval.from_coord((7, 12)).number(), 8)
        self.assertEqual(Interval.from_coord((-2, -4)).number(), -3)

    def test_name(self):
        self.assertEqual(interval_from_spn_range("C4", "A4").name(), "M6")
        self.assertEqual(interval_from_spn_range("G4", "Cbb5").name(), "dd4")
        self.assertEqual(interval_from_spn_range("E2", "Bx4").name(), "AA19")
        self.assertEqual(interval_from_spn_range("C4", "C5").name(), "P8")
        self.assertEqual(str(interval_from_spn_range("D4", "Fb4")), "d3")

    def test_descending_name_mirrors_ascending(self):
        falling = interval_from_spn_range("E4", "C4")
        self.assertTrue(falling.is_descending())
        self.assertEqual(falling.name(), "M3")
        self.assertEqual(interval_from_spn_range("C4", "Cb4").name(), "A1")
        self.assertTrue(interval_from_spn_range("C4", "Cb4").is_descending())
        self.assertFalse(interval_from_spn_range("C4", "C#4").is_descending())

    def test_from_name(self):
        self.assertEqual(Interval.from_name("M3").coord(), (2, 4))
        self.assertEqual(Interval.from_name("m2").coord(), (1, 1))
        self.assertEqual(Interval.from_name("P8").coord(), (7, 12))
        self.assertEqual(Interval.from_name("dd4").coord(), (3, 3))
        self.assertEqual(Interval.from_name("d3").coord(), (2, 2))
        self.assertEqual(Interval.from_name("A1").coord(), (0, 1))
        self.assertEqual(Interval.from_name("AA19").coord(), (18, 33))

    def test_from_name_round_trip(self):
        for name in ["P1", "A1", "m2", "M2", "d3", "ddd6", "P4", "A4", "d5", "M7", "P8", "M10", "AAA12"]:
            with self.subTest(name=name):
                self.assertEqual(Interval.from_name(name).name(), name)

    def test_from_name_invalid(self):
        for bad in ["P3", "M5", "m4", "X3", "M0", "3", "M", "", "Mm3", "P-5", "p5", "d1", "dd1"]:
            with self.subTest(name=bad):
                with self.assertRaises(ParseError) as ctx:
                    Interval.from_name(bad)
                self.assertEqual(ctx.exception.text, bad)


class TestIntervalArithmetic(unittest.TestCase):
    def test_neg_and_abs(self):
        rising = interval_from_spn_range("C4", "E4")
        falling = interval_from_spn_range("E4", "C4")
        self.assertEqual(-rising, falling)
        self.assertEqual(abs(falling), rising)
        self.assertEqual(abs(rising), rising)

    def test_add(self):
        self.assertEqual(Interval.from_name("M3") + Interval.from_name("m3"), Interval.from_name("P5"))
        self.assertEqual(Interval.from_name("P5") + Interval.from_name("P4"), Interval.from_name("P8"))

    def test_equality_and_hash(self):
        self.assertEqual(interval_from_spn_range("C4", "E4"), interval_from_spn_range("D4", "F#4"))
        self.assertNotEqual(interval_from_spn_range("C4", "E4"), interval_from_spn_range("C4", "Fb4"))
        self.assertEqual(len({Interval.from_name("M3"), interval_from_spn_range("A3", "C#4")}), 1)

    def test_from_coord_rejects_non_integers(self):
        with self.assertRaises(TypeError):
            Interval.from_coord((2.5, 4))
        with self.assertRaises(TypeError):
            Interval.from_coord((2, 4.0))

    def test_diminished_octave_still_parses(self):
        self.assertEqual(Interval.from_name("d8").coord(), (7, 11))
        self.assertEqual(Interval.from_name("d8").name(), "d8")

    def test_repr(self):
        self.assertEqual(repr(Interval.from_coord((17, 30))), "Interval.from_coord((17, 30))")


class TestIntervalMusic21(unittest.TestCase):
    def _m21_interval(self, start, end):
        return music21.interval.Interval(
            noteStart=music21.note.Note(Pitch(spn=start).to_music21()),
            noteEnd=music21.note.Note(Pitch(spn=end).to_music21()),
        )

    def test_names_agree_with_music21(self):
        for start, end in [
            ("C4", "D4"), ("C4", "A4"), ("G4", "D#5"), ("Bb3", "Dbb4"),
            ("D4", "Fb4"), ("G4", "Cbb5"), ("C4", "E5"), ("C4", "Fx4"),
        ]:
            with self.subTest(start=start, end=end):
                ours = interval_from_spn_range(start, end)
                self.assertEqual(ours.name(), self._m21_interval(start, end).name)

    def test_to_music21(self):
        m21 = interval_from_spn_range("G4", "Cbb5").to_music21()
        self.assertEqual(m21.name, "dd4")
        self.assertEqual(m21.semitones, 3)

    def test_from_music21(self):
        self.assertEqual(Interval.from_music21(music21.interval.Interval("M3")).coord(), (2, 4))
        self.assertEqual(Interval.from_music21(music21.interval.Interval("M-3")).coord(), (-2, -4))
        self.assertEqual(Interval.from_music21(self._m21_interval("E2", "Bx4")).quality(), "AA")


if __name__ == "__main__":
    unittest.main()
