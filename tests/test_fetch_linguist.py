"""
Tests for regenerating the bundled dataset. Network access is mocked.
Run from project root: python -m pytest tests/ -v
"""
import contextlib
import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import requests

SCRIPTS = Path(__file__).resolve().parent.parent / "scripts"
if str(SCRIPTS) not in sys.path:
    sys.path.insert(0, str(SCRIPTS))

import fetch_linguist  # noqa: E402
from linguist_table import ColorTable  # noqa: E402

LANGUAGES_YML = """\
Rust:
  type: programming
  color: "#dea584"
  aliases:
  - rs
  extensions:
  - ".rs"
  - ".rs.in"
  language_id: 327
Text:
  type: prose
  extensions:
  - ".txt"
  language_id: 372
C++:
  type: programming
  color: "#f34b7d"
  aliases:
  - cpp
  extensions:
  - ".cpp"
  - ".h"
"""


def _response(text):
    response = mock.Mock()
    response.text = text
    response.raise_for_status.return_value = None
    return response


class TestParse(unittest.TestCase):

    def test_only_colored_languages_are_kept(self):
        languages = fetch_linguist.parse_languages(LANGUAGES_YML)
        self.assertEqual(sorted(languages), ["C++", "Rust"])
        self.assertEqual(
            languages["Rust"],
            {"color": "#dea584", "aliases": ["rs"], "extensions": [".rs", ".rs.in"]},
        )

    def test_rejects_non_mapping(self):
        with self.assertRaises(ValueError):
            fetch_linguist.parse_languages("- just\n- a list\n")

    def test_rendered_module_loads_into_a_table(self):
        languages = fetch_linguist.parse_languages(LANGUAGES_YML)
        source = fetch_linguist.render_module(languages, source_url="https://example.invalid/languages.yml")
        namespace = {}
        exec(source, namespace)
        self.assertEqual(namespace["LANGUAGES"], languages)
        self.assertEqual(namespace["SOURCE_URL"], "https://example.invalid/languages.yml")

        table = ColorTable.from_languages(namespace["LANGUAGES"])
        self.assertEqual(table.lookup("rs").xterm_index, 180)
        self.assertEqual([r.matched_name for r in table.by_extension("h")], ["C++"])

    def test_rendered_module_is_sorted(self):
        source = fetch_linguist.render_module(fetch_linguist.parse_languages(LANGUAGES_YML))
        self.assertLess(source.index('"C++"'), source.index('"Rust"'))


class TestTimeout(unittest.TestCase):

    def _timeout(self, value):
        with mock.patch.dict(os.environ, {"LINGUIST_TIMEOUT": value}), \
                contextlib.redirect_stdout(io.StringIO()):
            return fetch_linguist._get_timeout(30)

    def test_valid(self):
        self.assertEqual(self._timeout("10"), 10)

    def test_invalid_falls_back(self):
        self.assertEqual(self._timeout("abc"), 30)
        self.assertEqual(self._timeout("-5"), 30)
        self.assertEqual(self._timeout(""), 30)


class TestMain(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.output = os.path.join(self.tmp.name, "out", "linguist_colors.py")
        patcher = mock.patch.object(fetch_linguist, "OUTPUT_PATH", self.output)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self.tmp.cleanup)

    def _main(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = fetch_linguist.main()
        return code, out.getvalue()

    def test_writes_module(self):
        with mock.patch.object(fetch_linguist.requests, "get", return_value=_response(LANGUAGES_YML)) as get:
            code, out = self._main()
        self.assertEqual(code, 0)
        self.assertTrue(os.path.exists(self.output))
        self.assertIn("Wrote 2 languages", out)
        self.assertEqual(get.call_args.kwargs["timeout"], fetch_linguist.TIMEOUT)

    def test_replaces_existing_module(self):
        os.makedirs(os.path.dirname(self.output))
        with open(self.output, "w", encoding="utf-8") as f:
            f.write("OLD = {}\n")
        with mock.patch.object(fetch_linguist.requests, "get", return_value=_response(LANGUAGES_YML)):
            code, _ = self._main()
        self.assertEqual(code, 0)
        with open(self.output, encoding="utf-8") as f:
            written = f.read()
        expected = fetch_linguist.render_module(fetch_linguist.parse_languages(LANGUAGES_YML))
        self.assertEqual(written, expected)
        self.assertEqual(os.listdir(os.path.dirname(self.output)), ["linguist_colors.py"])

    def test_failed_write_keeps_existing_module(self):
        os.makedirs(os.path.dirname(self.output))
        with open(self.output, "w", encoding="utf-8") as f:
            f.write("OLD = {}\n")
        with mock.patch.object(fetch_linguist.requests, "get", return_value=_response(LANGUAGES_YML)), \
                mock.patch.object(fetch_linguist.os, "replace", side_effect=OSError("disk full")):
            code, out = self._main()
        self.assertEqual(code, 1)
        self.assertIn("could not write", out)
        with open(self.output, encoding="utf-8") as f:
            self.assertEqual(f.read(), "OLD = {}\n")
        self.assertEqual(os.listdir(os.path.dirname(self.output)), ["linguist_colors.py"])

    def test_network_error(self):
        error = requests.exceptions.ConnectionError("offline")
        with mock.patch.object(fetch_linguist.requests, "get", side_effect=error):
            code, out = self._main()
        self.assertEqual(code, 1)
        self.assertIn("Error fetching", out)
        self.assertFalse(os.path.exists(self.output))

    def test_http_error(self):
        response = _response("")
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("404")
        with mock.patch.object(fetch_linguist.requests, "get", return_value=response):
            code, _ = self._main()
        self.assertEqual(code, 1)

    def test_bad_yaml(self):
        with mock.patch.object(fetch_linguist.requests, "get", return_value=_response("a: [unclosed")):
            code, out = self._main()
        self.assertEqual(code, 1)
        self.assertIn("could not parse", out)

    def test_no_colored_languages(self):
        text = "Text:\n  type: prose\n"
        with mock.patch.object(fetch_linguist.requests, "get", return_value=_response(text)):
            code, out = self._main()
        self.assertEqual(code, 1)
        self.assertIn("No languages with colors found", out)
        self.assertFalse(os.path.exists(self.output))


if __name__ == "__main__":
    unittest.main()
