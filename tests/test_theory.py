import unittest

from services.theory import (
    FLAT_ALIASES,
    PITCH_CLASSES,
    current_key,
    infer_key,
    looks_like_chord,
    normalize_note,
    parse_chord_root,
    parse_key,
    semitone_interval,
    transpose_chart,
    transpose_chord,
    transpose_chord_symbol,
    transpose_line,
    transpose_note,
)


class TestPitchClasses(unittest.TestCase):
    def test_ring_has_twelve_members(self):
        self.assertEqual(len(PITCH_CLASSES), 12)
        self.assertEqual(len(set(PITCH_CLASSES)), 12)
        self.assertEqual(PITCH_CLASSES[0], "C")
        self.assertEqual(PITCH_CLASSES[11], "B")

    def test_aliases_point_into_ring(self):
        for flat, sharp in FLAT_ALIASES.items():
            self.assertIn(sharp, PITCH_CLASSES, flat)


class TestNormalizeNote(unittest.TestCase):
    def test_empty_is_none(self):
        self.assertIsNone(normalize_note(""))
        self.assertIsNone(normalize_note(None))

    def test_flat_to_sharp(self):
        self.assertEqual(normalize_note("Db"), "C#")
        self.assertEqual(normalize_note("Gb"), "F#")
        self.assertEqual(normalize_note("Bb"), "A#")

    def test_lowercase_letter_is_uppercased(self):
        self.assertEqual(normalize_note("e"), "E")
        self.assertEqual(normalize_note("f#"), "F#")

    def test_unknown_spelling(self):
        self.assertIsNone(normalize_note("bb"))
        self.assertIsNone(normalize_note("Cb"))
        self.assertIsNone(normalize_note("H"))


class TestTransposeNote(unittest.TestCase):
    def test_result_stays_on_ring_and_is_periodic(self):
        for p in PITCH_CLASSES:
            for n in range(-30, 31):
                result = transpose_note(p, n)
                self.assertIn(result, PITCH_CLASSES)
                self.assertEqual(transpose_note(p, n + 12), result)

    def test_inverse_offset_restores_note(self):
        for p in PITCH_CLASSES:
            for n in range(-30, 31):
                self.assertEqual(transpose_note(transpose_note(p, n), -n), p)

    def test_flat_normalization(self):
        self.assertEqual(transpose_note("Db", 0), "C#")
        self.assertEqual(transpose_note("Bb", 2), "C")

    def test_wraps_large_offsets(self):
        self.assertEqual(transpose_note("C", 25), "C#")
        self.assertEqual(transpose_note("C", -13), "B")
        self.assertEqual(transpose_note("A", -9), "C")

    def test_unrecognized_note_passes_through(self):
        self.assertEqual(transpose_note("bb", 0), "BB")
        self.assertEqual(transpose_note("H", 3), "H")
        self.assertEqual(transpose_note("", 3), "")


class TestTransposeChord(unittest.TestCase):
    def test_suffix_preserved(self):
        self.assertEqual(transpose_chord_symbol("G7sus4", 2), "A7sus4")
        self.assertEqual(transpose_chord_symbol("Ebm", -1), "Dm")
        self.assertEqual(transpose_chord_symbol("Bbmaj7", 1), "Bmaj7")
        self.assertEqual(transpose_chord_symbol("F#°", 1), "G°")

    def test_non_note_start_untouched(self):
        self.assertEqual(transpose_chord_symbol("Hallelujah", 5), "Hallelujah")
        self.assertEqual(transpose_chord_symbol("N.C.", 5), "N.C.")
        self.assertEqual(transpose_chord_symbol("", 5), "")

    def test_off_ring_root_untouched(self):
        self.assertEqual(transpose_chord_symbol("Cbmaj7", 2), "Cbmaj7")
        self.assertEqual(transpose_chord_symbol("E#", 2), "E#")

    def test_slash_chord(self):
        self.assertEqual(transpose_chord("D/F#", -2), "C/E")
        self.assertEqual(transpose_chord("G/B", 2), "A/C#")
        self.assertEqual(transpose_chord("Am7/G", 3), "Cm7/A#")

    def test_only_first_slash_splits(self):
        self.assertEqual(transpose_chord("C/E/G", 2), "D/F#/G")

    def test_empty_slash_side(self):
        self.assertEqual(transpose_chord("C/", 2), "D/")
        self.assertEqual(transpose_chord("/E", 2), "/F#")


class TestLooksLikeChord(unittest.TestCase):
    def test_chords(self):
        for token in ["G", "Em7", "C#m", "Bb", "D/F#", "A/C#", "G#m/D#", "C/E/G", "C/", "A7+", "G°", "Bº", "Dsus4", "E5-"]:
            self.assertTrue(looks_like_chord(token), token)

    def test_wrapped_chords(self):
        for token in ["(G)", "[Am]", "G,", "D;", "Em:", "(C"]:
            self.assertTrue(looks_like_chord(token), token)

    def test_words_that_look_like_chords(self):
        self.assertTrue(looks_like_chord("Amor"))
        self.assertTrue(looks_like_chord("Be"))

    def test_not_chords(self):
        for token in ["Hallelujah", "graça", "x2", "[Intro]", "Gm7(b5)", "((G))", "", "("]:
            self.assertFalse(looks_like_chord(token), token)


class TestTransposeLine(unittest.TestCase):
    def test_zero_offset_keeps_spacing(self):
        self.assertEqual(transpose_line("G   D  Em", 0), "G   D  Em")

    def test_wrappers(self):
        self.assertEqual(transpose_line("(G)", 2), "(A)")
        self.assertEqual(transpose_line("G,", 2), "A,")
        self.assertEqual(transpose_line("[Em]", 2), "[F#m]")

    def test_other_trailing_punctuation_kept(self):
        self.assertEqual(transpose_line("G: D;", 2), "A: E;")

    def test_mixed_line(self):
        self.assertEqual(
            transpose_line("[Intro] G D/F# Em7 C9 (x2)", 2),
            "[Intro] A E/G# F#m7 D9 (x2)",
        )

    def test_lyrics_untouched(self):
        line = "Quão grande és Tu, sublime graça"
        self.assertEqual(transpose_line(line, 4), line)

    def test_sharp_bass_slash_chords(self):
        self.assertEqual(transpose_line("D/F#  G/B", 2), "E/G#  A/C#")
        self.assertEqual(transpose_line("A/C#", -2), "G/B")
        self.assertEqual(transpose_line("(Bb/D#m)", 1), "(B/Em)")

    def test_tabs_and_trailing_whitespace(self):
        self.assertEqual(transpose_line("\tG\t\tD  ", 2), "\tA\t\tE  ")

    def test_empty_line(self):
        self.assertEqual(transpose_line("", 2), "")
        self.assertEqual(transpose_line("    ", 2), "    ")


class TestTransposeChart(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(transpose_chart("", 3), "")
        self.assertEqual(transpose_chart(None, 3), "")

    def test_full_chart(self):
        chart = "G    D\nEm   C"
        up = transpose_chart(chart, 2)
        self.assertEqual(up, "A    E\nF#m   D")
        self.assertEqual(transpose_chart(up, -2), chart)

    def test_zero_is_identity(self):
        chart = "Intro: G  D/F#  Em7\n\n(G)  C9,  Am7\n   D4  D"
        self.assertEqual(transpose_chart(chart, 0), chart)

    def test_round_trip_for_sharp_charts(self):
        chart = "C   G/B  Am   F\nDm7  G7sus4  C#°  (E)"
        for n in range(-24, 25):
            self.assertEqual(transpose_chart(transpose_chart(chart, n), -n), chart, n)

    def test_line_count_preserved(self):
        chart = "G\n\nlyrics here\nD\n"
        self.assertEqual(transpose_chart(chart, 5).count("\n"), chart.count("\n"))

    def test_crlf_lines(self):
        self.assertEqual(transpose_chart("G\r\nD", 2), "A\r\nE")

    def test_chords_over_lyrics(self):
        chart = (
            "      G           D/F#\n"
            "Quão grande és Tu\n"
            "      Em       C\n"
            "Sublime graça"
        )
        expected = (
            "      A           E/G#\n"
            "Quão grande és Tu\n"
            "      F#m       D\n"
            "Sublime graça"
        )
        self.assertEqual(transpose_chart(chart, 2), expected)


class TestKeyHelpers(unittest.TestCase):
    def test_parse_key(self):
        self.assertEqual(parse_key("C"), 0)
        self.assertEqual(parse_key("Bb"), 10)
        self.assertEqual(parse_key("f#"), 6)
        with self.assertRaises(ValueError):
            parse_key("H")
        with self.assertRaises(ValueError):
            parse_key("")

    def test_semitone_interval(self):
        self.assertEqual(semitone_interval("G", "A"), 2)
        self.assertEqual(semitone_interval("A", "G"), 10)
        self.assertEqual(semitone_interval("Eb", "D#"), 0)

    def test_parse_chord_root(self):
        self.assertEqual(parse_chord_root("Bbmaj7"), "Bb")
        self.assertEqual(parse_chord_root("F#7"), "F#")
        self.assertIsNone(parse_chord_root("x2"))

    def test_current_key(self):
        self.assertEqual(current_key("G", 2), "A")
        self.assertEqual(current_key("Bb", 2), "C")
        self.assertIsNone(current_key(None, 2))
        self.assertIsNone(current_key("H", 2))

    def test_infer_key(self):
        self.assertEqual(infer_key("Intro:\n  (Bb)  F\n"), "A#")
        self.assertEqual(infer_key("[Verso]\nEm  C  G"), "E")
        self.assertIsNone(infer_key("só letra aqui"))
        self.assertIsNone(infer_key(None))


if __name__ == "__main__":
    unittest.main()
