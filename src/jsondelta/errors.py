from __future__ import annotations


class JsonDeltaError(Exception):
    """Base class for errors raised by jsondelta itself.

    Exceptions raised inside user callbacks (object hash, property filter) are
    never wrapped and do not derive from this class.
    """


class ConfigValidationError(JsonDeltaError, ValueError):
    pass


class InvalidDocumentError(JsonDeltaError, TypeError):
    pass


class PatchFormatError(JsonDeltaError, ValueError):
    pass


__all__ = [
    "ConfigValidationError",
    "InvalidDocumentError",
    "JsonDeltaError",
    "PatchFormatError",
]
