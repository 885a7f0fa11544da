from __future__ import annotations

from typing import Any, Dict

from .errors import SchemaError
from .merging import merge_into
from .paths import format_keys

VERSION_FIELD = '_version'


def get_version(data: Any) -> int:
    """Read `_version` from the document root, defaulting to 1.

    Only non-negative integers count; strings, floats and booleans fall back
    to 1 as well.
    """
    if not isinstance(data, dict):
        return 1
    version = data.get(VERSION_FIELD)
    if isinstance(version, bool) or not isinstance(version, int) or version < 0:
        return 1
    return version


def parse_v1(locale: str, data: Any) -> Dict[str, Any]:
    """Locale file format v1: the whole document belongs to one locale.

    ```yml
    welcome: Welcome
    foo: Foo bar
    ```
    """
    return {locale: data}


def parse_v2(data: Any, key_prefix: str = '') -> Dict[str, Any]:
    """Locale file format v2: pivot key-major data into locale-major data.

    ```yml
    _version: 2
    welcome.first:
      en: Welcome
      zh-CN: 欢迎
    nav:
      home:
        en: Home
        zh-CN: 首页
    ```

    becomes `{'en': {'welcome.first': 'Welcome', 'nav.home': 'Home'},
    'zh-CN': {...}}`. Dotted keys are stored flat; nesting depth is
    unbounded, each level adding one path segment.
    """
    translations: Dict[str, Any] = {}
    if not isinstance(data, dict):
        return translations

    for key, value in data.items():
        if not isinstance(value, dict):
            continue

        full_key = format_keys([key_prefix, key])
        nested = False
        for locale, text in value.items():
            if isinstance(text, str):
                merge_into(translations, locale, {full_key: text})
            elif isinstance(text, dict):
                nested = True

        if nested:
            for locale, fragment in parse_v2(value, full_key).items():
                merge_into(translations, locale, fragment)

    return translations


def normalize(data: Any, fallback_locale: str) -> Dict[str, Any]:
    """Return a `locale -> document` map for one decoded file."""
    if get_version(data) == 2:
        translations = parse_v2(data)
        if not translations:
            raise SchemaError(SchemaError.EMPTY)
        return translations

    return parse_v1(fallback_locale, data)
