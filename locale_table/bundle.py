"""Embed locale files into an importable Python module ahead of deployment.

Usage
-----
python -m locale_table.bundle ./myapp/_bundled_locales.py --locales ./locales

Without `--locales` the nearest `locales` directory above the working
directory is used; when there is none an empty bundle is written.

The generated module exposes `BUNDLED_DATA`, a list of
`(locale_hint, extension, content)` triples that
`StaticSourceProvider.from_module` replays at startup.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .paths import extension_of, locale_from_path
from .sources import SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)

BundleEntry = Tuple[str, str, str]

EMPTY_BUNDLE = "BUNDLED_DATA = []\n"
GENERATED_HEADER = "# Generated by locale_table.bundle. Do not edit.\n"


def find_workspace_root(start_dir, marker: str = 'locales') -> Optional[Path]:
    """Walk up from `start_dir` looking for a directory holding `marker`."""
    current = Path(start_dir).resolve()
    for parent in [current, *current.parents]:
        candidate = parent / marker
        if candidate.is_dir():
            logger.info("Found workspace root: %s", parent)
            return parent
    return None


def collect_bundle(locales_path) -> List[BundleEntry]:
    """Read the top-level locale files of `locales_path`, sorted by name."""
    locales_path = Path(locales_path)
    if not locales_path.is_dir():
        raise FileNotFoundError(f"Locales directory does not exist: {locales_path}")

    entries: List[BundleEntry] = []
    for path in sorted(locales_path.iterdir()):
        ext = extension_of(path)
        if not path.is_file() or ext not in SUPPORTED_EXTENSIONS:
            continue
        logger.info("Bundling: %s", path.name)
        entries.append((locale_from_path(path), ext, path.read_text(encoding='utf-8')))

    logger.info("Successfully bundled %d locale file(s)", len(entries))
    return entries


def render_bundle_module(entries: List[BundleEntry]) -> str:
    if not entries:
        return EMPTY_BUNDLE

    lines = ["BUNDLED_DATA = ["]
    for locale, ext, content in entries:
        lines.append(f"    ({locale!r}, {ext!r}, {content!r}),")
    lines.append("]")
    return '\n'.join(lines) + '\n'


def write_bundle(locales_path, dest) -> Path:
    """Write the bundle module; a `locales_path` of None writes an empty bundle."""
    dest = Path(dest)
    if locales_path is None:
        logger.warning("No locales found - generating empty bundle")
        entries: List[BundleEntry] = []
    else:
        entries = collect_bundle(locales_path)
    dest.write_text(GENERATED_HEADER + render_bundle_module(entries), encoding='utf-8')
    return dest


def resolve_locales_path(locales: Optional[str], start_dir=None) -> Optional[Path]:
    if locales:
        return Path(locales)
    root = find_workspace_root(start_dir or Path.cwd())
    if root is None:
        return None
    return root / 'locales'


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Embed locale files into a Python module.")
    parser.add_argument("dest", help="Path of the module to generate")
    parser.add_argument(
        "--locales",
        help="Directory holding the locale files (default: nearest `locales` directory above the working directory)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(message)s')
    try:
        dest = write_bundle(resolve_locales_path(args.locales), args.dest)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(f"Wrote {dest}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
