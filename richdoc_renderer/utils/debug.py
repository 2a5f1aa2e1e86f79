"""Helpers to persist a conversion manifest for debugging."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from richdoc_renderer.model.document_model import ConversionResult


class DebugDumper:
    """Writes a JSON description of a conversion onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, result: ConversionResult) -> Path:
        """Persist the conversion manifest; binary payloads are summarised by size."""
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / "conversion.json"
        target.write_text(json.dumps(self._serialize(result), indent=2), encoding="utf-8")
        return target

    def _serialize(self, result: ConversionResult) -> Dict[str, Any]:
        return {
            "document_name": result.document_name,
            "html_length": len(result.html),
            "images": [
                {"filename": image.filename, "mime_type": image.mime_type, "size": image.size}
                for image in result.images
            ],
        }
