"""Exceptions raised while converting a document into HTML."""
from __future__ import annotations

from typing import Sequence


class ConversionError(ValueError):
    """Base class for failures that abort a conversion."""


class UnsupportedAssetType(ConversionError):
    """An inline image uses a MIME type that cannot be exported."""

    def __init__(self, content_type: str) -> None:
        super().__init__(f"Unsupported image type: {content_type}")
        self.content_type = content_type


class MalformedAttributeRuns(ConversionError):
    """Attribute offsets of a text node violate the run contract."""

    def __init__(self, indices: Sequence[int], text_length: int, reason: str) -> None:
        super().__init__(f"Malformed attribute indices {list(indices)} for text of length {text_length}: {reason}")
        self.indices = list(indices)
        self.text_length = text_length


class DocumentLoadError(ConversionError):
    """A document description could not be turned into a node tree."""
