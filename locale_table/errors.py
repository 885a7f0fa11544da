from __future__ import annotations


class LocaleTableError(Exception):
    """Base class for every error raised while building a locale table."""


class DecodeError(LocaleTableError):
    """File content is not valid for its declared format."""

    def __init__(self, format: str, message: str):
        self.format = format
        self.message = message
        super().__init__(format, message)

    def __str__(self):
        return f"Invalid {self.format} format, {self.message}"


class UnsupportedFormatError(DecodeError):
    def __init__(self, extension: str):
        super().__init__(extension, "Invalid file extension")

    def __str__(self):
        return f"Invalid file extension: {self.format!r}"


class SchemaError(LocaleTableError):
    """A v2 document produced no locale entries."""

    EMPTY = "empty"

    def __init__(self, kind: str = EMPTY):
        self.kind = kind
        super().__init__("Invalid locale file format, please check the version field")


class LoadError(LocaleTableError):
    """Loading one source failed; the whole load is aborted."""

    def __init__(self, origin: str, reason: Exception):
        self.origin = origin
        self.reason = reason
        super().__init__(f"Parse file `{origin}` failed: {reason}")
