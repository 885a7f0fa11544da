"""Core logic for the Locale Table builder.

The Gradio UI lives in `app.py`. This package contains functions that:
- decode YAML / JSON / TOML locale files
- normalize v1 and v2 locale schemas into per-locale trees
- deep-merge contributions from several files
- flatten the result into dotted-key lookup tables
"""

from .errors import DecodeError, LoadError, LocaleTableError, SchemaError
from .loader import load_data, load_sources
from .lookup import LocaleChanged, Translator
from .sources import DirectorySourceProvider, Format, SourceRecord, StaticSourceProvider

__all__ = [
    "DecodeError",
    "DirectorySourceProvider",
    "Format",
    "LoadError",
    "LocaleChanged",
    "LocaleTableError",
    "SchemaError",
    "SourceRecord",
    "StaticSourceProvider",
    "Translator",
    "load_data",
    "load_sources",
]
