from __future__ import annotations

import logging
import threading
from copy import deepcopy
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .config import Settings
from .loader import load_data
from .sources import StaticSourceProvider

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = 'en'
LOCALE_CHANGED = 'i18n:locale_changed'


@dataclass(frozen=True)
class LocaleChanged:
    previous: str
    locale: str
    name: str = LOCALE_CHANGED


class Translator:
    """Lookup layer over a flattened `locale -> key -> text` table."""

    def __init__(self, data: Dict[str, Dict[str, str]], locale: str = DEFAULT_LOCALE):
        self.data = data
        self._locale = locale
        self._lock = threading.Lock()
        self._subscribers: List[Callable[[LocaleChanged], None]] = []

    @classmethod
    def from_settings(cls, settings: Settings) -> "Translator":
        sources = StaticSourceProvider.from_module(settings.bundle_module)
        data = load_data(sources, runtime_path=settings.locales_dir)
        return cls(data, settings.default_locale)

    def __deepcopy__(self, memo):
        # Per-session copies (e.g. UI state) start without subscribers.
        return type(self)(deepcopy(self.data, memo), self.get_locale())

    def available_locales(self) -> List[str]:
        return sorted(self.data)

    def get_translations_data(self) -> Dict[str, Dict[str, str]]:
        return deepcopy(self.data)

    def get_locale(self) -> str:
        with self._lock:
            return self._locale

    def translate(self, key: str) -> Optional[str]:
        """Return the text for `key` under the current locale, or None."""
        return self.data.get(self.get_locale(), {}).get(key)

    def set_locale(self, locale: str) -> LocaleChanged:
        """Switch the current locale, e.g. "zh-CN", and notify subscribers."""
        with self._lock:
            previous = self._locale
            self._locale = locale
            subscribers = list(self._subscribers)

        event = LocaleChanged(previous, locale)
        for callback in subscribers:
            try:
                callback(event)
            except Exception:
                logger.exception("Locale change subscriber %r failed", callback)
        return event

    def subscribe(self, callback: Callable[[LocaleChanged], None]) -> Callable[[], None]:
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe():
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe
