from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict


def merge_value(base: Any, incoming: Any) -> Any:
    """Merge `incoming` into `base` and return the result.

    Mappings are unioned key by key (in place when `base` is a dict).
    Any other pairing, arrays included, is replaced by a copy of `incoming`.
    """
    if isinstance(base, dict) and isinstance(incoming, dict):
        for key, value in incoming.items():
            if key in base:
                base[key] = merge_value(base[key], value)
            else:
                base[key] = deepcopy(value)
        return base

    return deepcopy(incoming)


def merge_into(documents: Dict[str, Any], locale: str, fragment: Any) -> Dict[str, Any]:
    """Fold one locale fragment into a `locale -> document` accumulator."""
    if locale in documents:
        documents[locale] = merge_value(documents[locale], fragment)
    else:
        documents[locale] = deepcopy(fragment)
    return documents


def merge_documents(documents: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
    for locale, fragment in incoming.items():
        merge_into(documents, locale, fragment)
    return documents
