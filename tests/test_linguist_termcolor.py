"""
Tests for the linguist-termcolor command line.
Run from project root: python -m pytest tests/ -v
"""
import contextlib
import io
import os
import sys
import unittest
from pathlib import Path
from unittest import mock

SCRIPTS = Path(__file__).resolve().parent.parent / "scripts"
if str(SCRIPTS) not in sys.path:
    sys.path.insert(0, str(SCRIPTS))

from linguist_termcolor import main  # noqa: E402


def run(argv):
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


class TestFor(unittest.TestCase):

    def test_rust(self):
        code, out, err = run(["--color", "none", "for", "rust"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "rgb #dea584 xterm 180 Rust\n")
        self.assertEqual(err, "")

    def test_less_common_language(self):
        code, out, _ = run(["--color", "none", "for", "brainfuck"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "rgb #2f2530 xterm 236 Brainfuck\n")

    def test_words_are_joined(self):
        code, out, _ = run(["--color", "none", "for", "vim", "script"])
        self.assertEqual(code, 0)
        self.assertTrue(out.rstrip("\n").endswith("Vim Script"))

    def test_extension_prints_every_language(self):
        code, out, _ = run(["--color", "none", "for", ".h"])
        self.assertEqual(code, 0)
        self.assertEqual(
            [line.rsplit(" ", 1)[-1] for line in out.splitlines()],
            ["C", "C++", "Objective-C"],
        )

    def test_truecolor(self):
        code, out, _ = run(["--color", "truecolor", "for", "Rust"])
        self.assertEqual(code, 0)
        self.assertIn("\033[1;38;2;222;165;132m", out)

    def test_auto_is_plain_when_not_a_tty(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            code, out, _ = run(["for", "rust"])
        self.assertEqual(code, 0)
        self.assertNotIn("\033[", out)

    def test_not_found(self):
        code, out, err = run(["for", "not-a-real-language"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("'not-a-real-language'", err)

    def test_empty_name(self):
        code, out, err = run(["for", "   "])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("Error:", err)


class TestXterm(unittest.TestCase):

    def test_colors(self):
        code, out, _ = run(["--color", "none", "xterm", "#ff0000", "eeeeee"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "rgb #ff0000 xterm 9  \nrgb #eeeeee xterm 255\n")

    def test_bad_color_prints_nothing(self):
        code, out, err = run(["--color", "none", "xterm", "#ff0000", "nope"])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("usage:", err)


class TestArguments(unittest.TestCase):

    def test_missing_command(self):
        code, out, err = run([])
        self.assertEqual(code, 2)
        self.assertIn("usage:", err)

    def test_missing_name(self):
        code, _, err = run(["for"])
        self.assertEqual(code, 2)
        self.assertIn("Error:", err)

    def test_unknown_color_mode(self):
        code, _, _ = run(["--color", "sixteen", "for", "rust"])
        self.assertEqual(code, 2)

    def test_version(self):
        with self.assertRaises(SystemExit) as ctx, contextlib.redirect_stdout(io.StringIO()):
            main(["--version"])
        self.assertEqual(ctx.exception.code, 0)


if __name__ == "__main__":
    unittest.main()
