from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Optional

from .errors import DecodeError, LoadError, SchemaError
from .flattening import flatten_translations
from .io_utils import decode
from .merging import merge_documents
from .schema_utils import normalize
from .sources import DirectorySourceProvider, SourceRecord

logger = logging.getLogger(__name__)

FlatTable = Dict[str, Dict[str, str]]


def parse_source(record: SourceRecord) -> Dict[str, Any]:
    """Decode and normalize one source into a `locale -> document` map."""
    try:
        data = decode(record.content, record.format)
        return normalize(data, record.locale_hint)
    except (DecodeError, SchemaError) as exc:
        raise LoadError(record.origin, exc) from exc


def merge_sources(sources: Iterable[SourceRecord], documents: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    if documents is None:
        documents = {}
    for record in sources:
        merge_documents(documents, parse_source(record))
    return documents


def load_sources(sources: Iterable[SourceRecord]) -> FlatTable:
    """Merge every source in order and flatten the result per locale."""
    return flatten_translations(merge_sources(sources))


def load_data(
    sources: Optional[Iterable[SourceRecord]] = None,
    runtime_path: Optional[str] = None,
    ignore_if: Optional[Callable[[str], bool]] = None,
) -> FlatTable:
    """Build the lookup table from embedded sources plus an optional runtime directory.

    Files found under `runtime_path` are merged on top of `sources`, so they
    can override or extend embedded translations at matching key paths.
    A missing directory contributes nothing.
    """
    documents = merge_sources(sources or ())

    if runtime_path is not None:
        merge_sources(DirectorySourceProvider(runtime_path, ignore_if), documents)

    table = flatten_translations(documents)
    logger.debug("i18n-locales=%s", ', '.join(sorted(table)))
    return table
