from __future__ import annotations

from typing import Any, Dict, List, Optional

import gradio as gr

from .errors import LocaleTableError
from .io_utils import read_source_content
from .loader import load_sources
from .lookup import DEFAULT_LOCALE, Translator
from .sources import SourceRecord


def _file_name(file_obj) -> str:
    if isinstance(file_obj, str):
        return file_obj
    return getattr(file_obj, 'name', str(file_obj))


def load_translations(translator: Optional[Translator]) -> Dict[str, Dict[str, str]]:
    if translator is None:
        return {}
    return translator.get_translations_data()


def translate(translator: Optional[Translator], key: str) -> Optional[str]:
    if translator is None or not key:
        return None
    return translator.translate(key.strip())


def get_locale(translator: Optional[Translator]) -> str:
    if translator is None:
        return DEFAULT_LOCALE
    return translator.get_locale()


def get_available_locales(translator: Optional[Translator]) -> List[str]:
    if translator is None:
        return []
    return translator.available_locales()


def set_locale(translator: Optional[Translator], locale: str, key: str = ''):
    """Switch locale and refresh the lookup for the key currently shown."""
    if translator is None or not locale:
        return "No translations loaded.", None
    event = translator.set_locale(locale)
    return f"Locale changed: {event.previous} -> {event.locale}", translate(translator, key)


def build_translator(files, current_locale: str = DEFAULT_LOCALE) -> Translator:
    """Load uploaded locale files, in upload order, into a new translator."""
    records = []
    for file_obj in files or []:
        name = _file_name(file_obj)
        records.append(SourceRecord.from_path(name, read_source_content(file_obj)))
    return Translator(load_sources(records), current_locale or DEFAULT_LOCALE)


def handle_locale_upload(files, current_locale: Optional[str]):
    if not files:
        return None, "No file uploaded.", gr.update(choices=[], value=None), {}

    try:
        translator = build_translator(files, current_locale or DEFAULT_LOCALE)
    except (LocaleTableError, OSError, UnicodeDecodeError) as e:
        return None, f"Error loading locales: {str(e)}", gr.update(choices=[], value=None), {}

    locales = translator.available_locales()
    locale = translator.get_locale()
    if locales and locale not in locales:
        translator.set_locale(locales[0])
        locale = locales[0]

    key_count = sum(len(keys) for keys in translator.data.values())
    status = f"Successfully loaded {len(files)} file(s). Found {len(locales)} locales and {key_count} keys."
    return translator, status, gr.update(choices=locales, value=locale), load_translations(translator)


def summarize_locales(translator: Optional[Translator]) -> List[List[Any]]:
    """Rows of `[locale, key count]` for the overview table."""
    if translator is None:
        return []
    return [[locale, len(translator.data[locale])] for locale in get_available_locales(translator)]
