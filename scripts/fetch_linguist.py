import json
import os
import sys
import tempfile

import requests
import yaml
from dotenv import load_dotenv

load_dotenv()

DEFAULT_URL = (
    "https://raw.githubusercontent.com/github-linguist/linguist/main/"
    "lib/linguist/languages.yml"
)


def _get_timeout(default: int = 30) -> int:
    """Read LINGUIST_TIMEOUT (seconds) from env, falling back to default."""
    raw = os.getenv("LINGUIST_TIMEOUT", "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
        if value <= 0:
            print(
                f"Warning: LINGUIST_TIMEOUT must be positive, got {raw!r}. Falling back to {default}."
            )
            return default
        return value
    except ValueError:
        print(f"Warning: invalid LINGUIST_TIMEOUT value {raw!r}. Falling back to {default}.")
        return default


URL = os.getenv("LINGUIST_URL") or DEFAULT_URL
TOKEN = os.getenv("GH_TOKEN")
TIMEOUT = _get_timeout(30)
OUTPUT_PATH = os.getenv("LINGUIST_OUTPUT") or os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "linguist_colors.py"
)

BASE_HEADERS = {"User-Agent": "linguist-termcolor/0.1 (+https://github.com/github-linguist/linguist)"}
if TOKEN:
    BASE_HEADERS["Authorization"] = f"token {TOKEN}"


def fetch_languages_yml(url=URL, timeout=TIMEOUT):
    """Download languages.yml and return its text."""
    print(f"Fetching {url}")
    r = requests.get(url, headers=BASE_HEADERS, timeout=timeout)
    r.raise_for_status()
    return r.text


def parse_languages(text):
    """Parse languages.yml, keeping only languages that have a color.

    Returns ``{name: {"color", "aliases", "extensions"}}``.
    """
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("languages.yml must contain a mapping of languages")

    languages = {}
    for name, info in data.items():
        if not isinstance(info, dict):
            continue
        color = info.get("color")
        if not color:
            continue
        languages[str(name)] = {
            "color": str(color),
            "aliases": [str(a) for a in info.get("aliases") or []],
            "extensions": [str(e) for e in info.get("extensions") or []],
        }
    return languages


def render_module(languages, source_url=URL):
    """Render the bundled dataset module, one language per line."""
    lines = [
        "# Generated by fetch_linguist.py from GitHub Linguist's languages.yml.",
        "# Only languages with a color are included. Do not edit by hand.",
        "",
        f"SOURCE_URL = {json.dumps(source_url)}",
        "",
        "LANGUAGES = {",
    ]
    for name in sorted(languages, key=str.casefold):
        info = languages[name]
        lines.append(
            f"    {json.dumps(name)}: {{"
            f'"color": {json.dumps(info["color"])}, '
            f'"aliases": {json.dumps(info["aliases"])}, '
            f'"extensions": {json.dumps(info["extensions"])}}},'
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def main():
    """Regenerate linguist_colors.py from the upstream dataset."""
    print("Refreshing bundled Linguist colors...")

    try:
        text = fetch_languages_yml()
    except requests.exceptions.RequestException as e:
        print(f"Error fetching {URL}: {e}")
        return 1

    try:
        languages = parse_languages(text)
    except (yaml.YAMLError, ValueError) as e:
        print(f"Error: could not parse languages.yml: {e}")
        return 1

    if not languages:
        print("Error: No languages with colors found!")
        return 1

    out_dir = os.path.dirname(OUTPUT_PATH)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    # write beside the target, then swap it in; a failed write leaves the old module
    tmp = tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=out_dir or ".", suffix=".tmp", delete=False
    )
    try:
        with tmp:
            tmp.write(render_module(languages))
        os.replace(tmp.name, OUTPUT_PATH)
    except OSError as e:
        os.unlink(tmp.name)
        print(f"Error: could not write {OUTPUT_PATH}: {e}")
        return 1

    print(f"Wrote {len(languages)} languages to {OUTPUT_PATH}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
