"""Source providers feeding the loader.

Every provider yields `SourceRecord` items in a fixed order. The static
provider replays entries embedded ahead of deployment (see `bundle.py`);
the directory provider scans a locales folder at runtime.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from .errors import LoadError, UnsupportedFormatError
from .paths import extension_of, locale_from_path

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ('yml', 'yaml', 'json', 'toml')


class Format(Enum):
    YAML = 'yaml'
    JSON = 'json'
    TOML = 'toml'

    @property
    def label(self) -> str:
        return self.name

    @classmethod
    def from_extension(cls, ext: str) -> "Format":
        normalized = (ext or '').lower().lstrip('.')
        if normalized in ('yml', 'yaml'):
            return cls.YAML
        if normalized == 'json':
            return cls.JSON
        if normalized == 'toml':
            return cls.TOML
        raise UnsupportedFormatError(ext)


@dataclass(frozen=True)
class SourceRecord:
    locale_hint: str
    format: Format
    content: str
    origin: str = '<memory>'

    @classmethod
    def from_path(cls, path, content: Optional[str] = None) -> "SourceRecord":
        path = Path(path)
        fmt = Format.from_extension(extension_of(path))
        if content is None:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        return cls(locale_from_path(path), fmt, content, str(path))


class StaticSourceProvider:
    """Replay `(locale_hint, ext, content)` triples in embedding order."""

    def __init__(self, entries: Iterable[Tuple[str, str, str]] = ()):
        self.entries: List[Tuple[str, str, str]] = list(entries)

    @classmethod
    def from_module(cls, module_name: Optional[str]) -> "StaticSourceProvider":
        if not module_name:
            return cls()
        module = importlib.import_module(module_name)
        return cls(getattr(module, 'BUNDLED_DATA', []))

    def __iter__(self) -> Iterator[SourceRecord]:
        for locale, ext, content in self.entries:
            origin = f"bundle:{locale}.{ext}"
            try:
                fmt = Format.from_extension(ext)
            except UnsupportedFormatError as exc:
                raise LoadError(origin, exc) from exc
            yield SourceRecord(locale, fmt, content, origin)

    def __len__(self):
        return len(self.entries)


class DirectorySourceProvider:
    """Scan `<root>/**/*.{yml,yaml,json,toml}` for locale files.

    Matches are visited in lexicographic path order so repeated loads of the
    same directory always merge conflicting keys the same way.
    """

    def __init__(self, root, ignore_if: Optional[Callable[[str], bool]] = None):
        self.root = root
        self.ignore_if = ignore_if or (lambda _path: False)

    def find_files(self) -> List[Path]:
        try:
            root = Path(self.root).resolve()
        except (OSError, RuntimeError) as exc:
            logger.debug("i18n-error=%s", exc)
            return []

        logger.debug("i18n-locale=%s/**/*.{%s}", root, ','.join(SUPPORTED_EXTENSIONS))

        if not root.is_dir():
            logger.debug("i18n-error=path not exists: %s", root)
            return []

        matches = [
            p for p in root.rglob('*')
            if p.is_file() and extension_of(p) in SUPPORTED_EXTENSIONS
        ]
        return sorted(matches)

    def __iter__(self) -> Iterator[SourceRecord]:
        for path in self.find_files():
            logger.debug("i18n-load=%s", path)
            if self.ignore_if(str(path)):
                logger.debug("i18n-skip=%s", path)
                continue
            try:
                record = SourceRecord.from_path(path)
            except (OSError, UnicodeDecodeError) as exc:
                raise LoadError(str(path), exc) from exc
            yield record
