from __future__ import annotations

from pathlib import PurePath
from typing import Iterable, List


def format_keys(keys: Iterable[str]) -> str:
    """Join key segments with '.', omitting empty segments."""
    parts: List[str] = [k for k in keys if k]
    return '.'.join(parts)


def join_key(prefix: str, key: str) -> str:
    if not prefix:
        return key
    return f"{prefix}.{key}"


def locale_from_path(path) -> str:
    """Derive the v1 locale hint from a file name.

    The stem's last dot-separated part wins, so both `en.yml` and
    `messages.en.yml` map to `en`.
    """
    stem = PurePath(str(path)).stem
    return stem.split('.')[-1]


def extension_of(path) -> str:
    return PurePath(str(path)).suffix.lstrip('.')
