"""Artifacts produced by a single conversion."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class ImageRecord:
    """An extracted image asset, renamed for publication."""

    filename: str
    mime_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(slots=True)
class ConversionResult:
    """Sanitized HTML together with the images it references."""

    document_name: str
    html: str
    images: List[ImageRecord] = field(default_factory=list)
