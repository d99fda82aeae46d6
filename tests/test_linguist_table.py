"""
Tests for language lookup over the bundled Linguist dataset.
Run from project root: python -m pytest tests/ -v
"""
import contextlib
import io
import sys
import unittest
from pathlib import Path

SCRIPTS = Path(__file__).resolve().parent.parent / "scripts"
if str(SCRIPTS) not in sys.path:
    sys.path.insert(0, str(SCRIPTS))

from linguist_table import (  # noqa: E402
    ColorTable,
    LanguageColor,
    NotFoundError,
    default_table,
    normalize,
)


class TestNormalize(unittest.TestCase):

    def test_normalize(self):
        self.assertEqual(normalize("  Rust \n"), "rust")
        self.assertEqual(normalize("Vim   Script"), "vim script")
        self.assertEqual(normalize("C++"), "c++")


class TestLookup(unittest.TestCase):

    def setUp(self):
        self.table = default_table()

    def test_lookup_is_case_insensitive(self):
        results = [self.table.lookup(q) for q in ("Rust", "rust", "RUST", "  rust  ")]
        self.assertTrue(all(r == results[0] for r in results))

    def test_rust_end_to_end(self):
        result = self.table.lookup("rust")
        self.assertEqual(result.matched_name, "Rust")
        self.assertEqual(result.rgb, (222, 165, 132))
        self.assertEqual(result.hex, "#dea584")
        self.assertEqual(result.xterm_index, 180)

    def test_python_end_to_end(self):
        result = self.table.lookup("python")
        self.assertEqual(result.hex, "#3572a5")
        self.assertEqual(result.xterm_index, 61)

    def test_lookup_by_alias(self):
        self.assertEqual(self.table.lookup("golang").matched_name, "Go")
        self.assertEqual(self.table.lookup("JS").matched_name, "JavaScript")
        self.assertEqual(self.table.lookup("cpp").matched_name, "C++")

    def test_multi_word_names(self):
        self.assertEqual(self.table.lookup("vim   script").matched_name, "Vim Script")
        self.assertEqual(self.table.lookup("common lisp").matched_name, "Common Lisp")

    def test_no_partial_matching(self):
        for query in ("rus", "pyth", "script"):
            with self.assertRaises(NotFoundError):
                self.table.lookup(query)

    def test_unknown_name(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.table.lookup("not-a-real-language")
        self.assertEqual(ctx.exception.query, "not-a-real-language")
        self.assertIsInstance(ctx.exception, LookupError)

    def test_every_language_has_a_palette_index(self):
        self.assertGreater(len(self.table), 50)
        for name in self.table.names():
            result = self.table.lookup(name)
            self.assertEqual(result.matched_name, name)
            self.assertTrue(0 <= result.xterm_index <= 255)

    def test_default_table_is_built_once(self):
        self.assertIs(default_table(), default_table())


class TestBundledDataset(unittest.TestCase):

    def test_holds_the_full_linguist_snapshot(self):
        self.assertGreaterEqual(len(default_table()), 500)

    def test_builds_without_warnings(self):
        from linguist_colors import LANGUAGES

        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            table = ColorTable.from_languages(LANGUAGES)
        self.assertEqual(err.getvalue(), "")
        self.assertEqual(len(table), len(LANGUAGES))

    def test_less_common_languages(self):
        table = default_table()
        expected = {
            "Brainfuck": "#2f2530",
            "Apex": "#1797c0",
            "Bicep": "#519aba",
            "Cython": "#fedf5b",
            "Objective-J": "#ff0c5a",
            "Zimpl": "#d67711",
        }
        for name, color in expected.items():
            result = table.lookup(name.lower())
            self.assertEqual(result.matched_name, name)
            self.assertEqual(result.hex, color)

    def test_aliases_of_less_common_languages(self):
        table = default_table()
        self.assertEqual(table.lookup("coq").matched_name, "Rocq Prover")
        self.assertEqual(table.lookup("pyrex").matched_name, "Cython")
        self.assertEqual(table.lookup("nushell").matched_name, "Nushell")
        self.assertEqual(table.lookup("nush").matched_name, "Nu")


class TestExtensions(unittest.TestCase):

    def setUp(self):
        self.table = default_table()

    def test_shared_extension_returns_all_languages(self):
        names = [r.matched_name for r in self.table.by_extension(".h")]
        self.assertEqual(names, ["C", "C++", "Objective-C"])

    def test_leading_dot_is_optional(self):
        self.assertEqual(self.table.by_extension("rs"), self.table.by_extension(".RS"))

    def test_unknown_extension(self):
        with self.assertRaises(NotFoundError):
            self.table.by_extension(".nope")

    def test_find_prefers_names_and_aliases(self):
        self.assertEqual([r.matched_name for r in self.table.find("rs")], ["Rust"])
        self.assertEqual([r.matched_name for r in self.table.find(".rs")], ["Rust"])

    def test_find_falls_back_to_extensions(self):
        self.assertEqual([r.matched_name for r in self.table.find("gemspec")], ["Ruby"])

    def test_find_reports_original_query(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.table.find("Not A Language")
        self.assertEqual(ctx.exception.query, "Not A Language")


class TestBuildTable(unittest.TestCase):

    def test_languages_without_color_are_skipped(self):
        table = ColorTable.from_languages({
            "Text": {"extensions": [".txt"]},
            "Foo": {"color": "#010203", "aliases": ["foolang"], "extensions": [".foo"]},
            "Empty": None,
        })
        self.assertEqual(len(table), 1)
        self.assertNotIn("Text", table)
        self.assertIn("foo", table)
        self.assertEqual(table.lookup("foolang").rgb, (1, 2, 3))

    def test_invalid_color_is_skipped_with_warning(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            table = ColorTable.from_languages({"Bad": {"color": "blue"}})
        self.assertEqual(len(table), 0)
        self.assertIn("Warning: skipping Bad", err.getvalue())

    def test_duplicate_names_rejected(self):
        with self.assertRaises(ValueError):
            ColorTable([LanguageColor("Go", (0, 0, 0)), LanguageColor("GO", (1, 1, 1))])

    def test_shared_alias_stays_with_first_language(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            table = ColorTable([
                LanguageColor("A", (0, 0, 0), aliases=("x",)),
                LanguageColor("B", (1, 1, 1), aliases=("X",)),
            ])
        self.assertEqual(len(table), 2)
        self.assertEqual(table.lookup("x").matched_name, "A")
        self.assertIn("Warning: alias 'X' of B already belongs to A", err.getvalue())


if __name__ == "__main__":
    unittest.main()
