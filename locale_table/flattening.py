from __future__ import annotations

import math
from typing import Any, Dict

from .paths import join_key


def scalar_to_text(value: Any) -> str:
    """Render a leaf value the way it appears in the lookup table."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and not math.isfinite(value):
        # No JSON form for inf/nan.
        return ''
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, list):
        # Arrays are not translatable leaves.
        return ''
    return str(value)


def flatten_keys(data: Any, prefix: str = '') -> Dict[str, str]:
    """Flatten a nested translation tree into `dotted.key -> text`."""
    if not isinstance(data, dict):
        return {prefix: scalar_to_text(data)}

    flat: Dict[str, str] = {}
    for key, value in data.items():
        flat.update(flatten_keys(value, join_key(prefix, key)))
    return flat


def flatten_translations(documents: Dict[str, Any]) -> Dict[str, Dict[str, str]]:
    return {locale: flatten_keys(doc) for locale, doc in documents.items()}
