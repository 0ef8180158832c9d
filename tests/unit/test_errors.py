from __future__ import annotations

from jsondelta.errors import ConfigValidationError, InvalidDocumentError, JsonDeltaError, PatchFormatError


def test_error_taxonomy_keeps_builtin_bases() -> None:
    assert issubclass(ConfigValidationError, JsonDeltaError)
    assert issubclass(ConfigValidationError, ValueError)
    assert issubclass(InvalidDocumentError, JsonDeltaError)
    assert issubclass(InvalidDocumentError, TypeError)
    assert issubclass(PatchFormatError, JsonDeltaError)
    assert issubclass(PatchFormatError, ValueError)
