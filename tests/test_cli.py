import io
import json
import unittest
from unittest.mock import patch
from modescale.cli import main


class TestCli(unittest.TestCase):
    def _run(self, argv):
        with patch("sys.stdout", new_callable=io.StringIO) as out, \
                patch("sys.stderr", new_callable=io.StringIO) as err:
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_as_string(self):
        code, out, err = self._run(["-r", "G#", "-m", "6", "-s"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "G# A# B C# D# E F#\n")
        self.assertEqual(err, "")

    def test_defaults_structured(self):
        code, out, _ = self._run([])
        self.assertEqual(code, 0)
        tones = json.loads(out)
        self.assertEqual(len(tones), 7)
        self.assertEqual(tones[0], {"letter": "C", "accidentals": 0, "name": "C"})
        self.assertEqual([t["name"] for t in tones], list("CDEFGAB"))

    def test_harmonic_minor(self):
        _, out, _ = self._run(["--root", "C", "--harmonic-minor", "--as-string"])
        self.assertEqual(out.strip(), "C D Eb F G Ab B")

    def test_melodic_minor_structured(self):
        _, out, _ = self._run(["-r", "c", "--melodic-minor"])
        tones = json.loads(out)
        self.assertEqual(tones[2], {"letter": "E", "accidentals": -1, "name": "Eb"})

    def test_negative_mode(self):
        _, out, _ = self._run(["-r", "D", "-m", "-5", "-s"])
        self.assertEqual(out.strip(), "D E F G A B C")

    def test_invalid_root(self):
        code, out, err = self._run(["-r", "C#b", "-s"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error", err)
        self.assertIn("C#b", err)

    def test_families_are_exclusive(self):
        with self.assertRaises(SystemExit):
            self._run(["--melodic-minor", "--harmonic-minor"])

    def test_prefer_flats(self):
        _, out, _ = self._run(["-r", "F######", "-s", "--prefer-flats"])
        self.assertTrue(out.startswith("F###### Gbbbbbb "))

    def test_midi(self):
        _, out, _ = self._run(["-s", "--midi", "4"])
        lines = out.splitlines()
        self.assertEqual(lines[0], "C D E F G A B")
        self.assertEqual(lines[1], "60 62 64 65 67 69 71")

    def test_midi_out_of_music21_range(self):
        code, out, err = self._run(["-r", "F######", "-s", "--midi", "4"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("music21", err)

    def test_midi_octave_out_of_range(self):
        code, out, err = self._run(["-s", "--midi", "12"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("MIDI range", err)

    def test_verbose(self):
        _, out, _ = self._run(["-r", "D", "-m", "2", "-s", "-v"])
        self.assertIn("Dorian", out)
        self.assertIn("Scale Spelling Trace", out)
        self.assertTrue(out.rstrip().endswith("D E F G A B C"))


if __name__ == "__main__":
    unittest.main()
