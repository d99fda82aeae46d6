"""Language name -> color lookup over the bundled Linguist dataset."""

import functools
import re
import sys
from dataclasses import dataclass
from typing import Dict, List, Tuple

from xterm_palette import nearest, parse_hex, to_hex

_WHITESPACE_RE = re.compile(r"\s+")


class NotFoundError(LookupError):
    """No language matches the query."""

    def __init__(self, query: str):
        super().__init__(f"no color found for language {query!r}")
        self.query = query


@dataclass(frozen=True)
class LanguageColor:
    name: str
    rgb: Tuple[int, int, int]
    aliases: Tuple[str, ...] = ()
    extensions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Result:
    rgb: Tuple[int, int, int]
    xterm_index: int
    matched_name: str

    @property
    def hex(self) -> str:
        return to_hex(self.rgb)


def normalize(text: str) -> str:
    """Case-fold and trim a query, collapsing inner whitespace."""
    return _WHITESPACE_RE.sub(" ", text.strip()).casefold()


def _normalize_extension(ext: str) -> str:
    ext = normalize(ext)
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def _result(lang: LanguageColor) -> Result:
    return Result(rgb=lang.rgb, xterm_index=nearest(lang.rgb), matched_name=lang.name)


class ColorTable:
    """Read-only index of languages by name, alias and file extension."""

    def __init__(self, languages):
        self._by_name: Dict[str, LanguageColor] = {}
        self._by_alias: Dict[str, LanguageColor] = {}
        self._by_extension: Dict[str, List[LanguageColor]] = {}

        for lang in languages:
            key = normalize(lang.name)
            if key in self._by_name:
                raise ValueError(f"duplicate language name: {lang.name!r}")
            self._by_name[key] = lang

            for alias in lang.aliases:
                alias_key = normalize(alias)
                other = self._by_alias.get(alias_key)
                if other is None:
                    self._by_alias[alias_key] = lang
                elif other is not lang:
                    # first language keeps the alias
                    print(
                        f"Warning: alias {alias!r} of {lang.name} already belongs to {other.name}",
                        file=sys.stderr,
                    )

            for ext in lang.extensions:
                langs = self._by_extension.setdefault(_normalize_extension(ext), [])
                if lang not in langs:
                    langs.append(lang)

    @classmethod
    def from_languages(cls, mapping):
        """Build a table from ``{name: {"color", "aliases", "extensions"}}``.

        Languages without a valid hex color are skipped.
        """
        languages = []
        for name, info in mapping.items():
            color = (info or {}).get("color")
            if not color:
                continue
            try:
                rgb = parse_hex(color)
            except ValueError:
                print(f"Warning: skipping {name}: invalid color {color!r}", file=sys.stderr)
                continue
            languages.append(
                LanguageColor(
                    name=name,
                    rgb=rgb,
                    aliases=tuple(info.get("aliases") or ()),
                    extensions=tuple(info.get("extensions") or ()),
                )
            )
        return cls(languages)

    def __len__(self):
        return len(self._by_name)

    def __contains__(self, name):
        return normalize(name) in self._by_name

    def names(self) -> List[str]:
        return sorted((lang.name for lang in self._by_name.values()), key=str.casefold)

    def lookup(self, name: str) -> Result:
        """Resolve a language name or alias; exact match after normalization."""
        key = normalize(name)
        lang = self._by_name.get(key) or self._by_alias.get(key)
        if lang is None:
            raise NotFoundError(name)
        return _result(lang)

    def by_extension(self, ext: str) -> List[Result]:
        """All languages that claim a file extension, sorted by name."""
        langs = self._by_extension.get(_normalize_extension(ext))
        if not langs:
            raise NotFoundError(ext)
        return [_result(lang) for lang in sorted(langs, key=lambda l: l.name.casefold())]

    def find(self, query: str) -> List[Result]:
        """Resolve a CLI query: a name or alias first, then a file extension."""
        if query.strip().startswith("."):
            return self.by_extension(query)
        try:
            return [self.lookup(query)]
        except NotFoundError:
            pass
        try:
            return self.by_extension(query)
        except NotFoundError:
            raise NotFoundError(query) from None


@functools.lru_cache(maxsize=None)
def default_table() -> ColorTable:
    """The table for the bundled dataset, built once per process."""
    from linguist_colors import LANGUAGES

    return ColorTable.from_languages(LANGUAGES)
