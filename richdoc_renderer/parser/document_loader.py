"""Load JSON document descriptions into the node tree.

A description looks like::

    {
      "name": "My Report",
      "body": [
        {"type": "paragraph", "heading": 1, "children": [{"type": "text", "text": "Title"}]},
        {"type": "list_item", "list_id": "kix.1", "nesting_level": 0, "glyph_type": "BULLET",
         "children": [{"type": "text", "text": "Item", "runs": [{"start": 0, "bold": true}]}]},
        {"type": "image", "content_type": "image/png", "alt": "Chart", "path": "chart.png"}
      ]
    }

Image payloads are given either inline as base64 (``data``) or as a ``path``
relative to the JSON file.
"""
from __future__ import annotations

import base64
import binascii
import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from richdoc_renderer.model.elements import (
    AttributeRun,
    ContainerNode,
    Document,
    GlyphType,
    InlineImageNode,
    ListItemNode,
    Node,
    ParagraphHeading,
    ParagraphNode,
    TextAttributes,
    TextNode,
)
from richdoc_renderer.model.errors import DocumentLoadError
from richdoc_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)


class DocumentLoader:
    """Builds :class:`Document` trees from parsed JSON payloads."""

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = base_dir

    @classmethod
    def load(cls, json_path: Path) -> Document:
        """Read a JSON description from disk; image paths resolve next to it."""
        try:
            payload = json.loads(json_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(f"Invalid JSON in {json_path.name}: {exc}") from exc

        document = cls(base_dir=json_path.parent).build(payload, default_name=json_path.stem)
        LOGGER.debug("Loaded %d top-level nodes from %s", document.body.num_children, json_path.name)
        return document

    def build(self, payload: Mapping[str, Any], default_name: str = "Untitled document") -> Document:
        if not isinstance(payload, Mapping):
            raise DocumentLoadError("Document description must be a JSON object")
        name = self._optional_str(payload, "name") or default_name
        body = ContainerNode(children=self._parse_children(payload.get("body", [])))
        return Document(name=name, body=body)

    # ------------------------------------------------------------------
    def _parse_children(self, items: Any) -> List[Node]:
        if not isinstance(items, list):
            raise DocumentLoadError("'children' and 'body' must be lists")
        return [self._parse_node(item) for item in items]

    def _parse_node(self, item: Any) -> Node:
        if not isinstance(item, Mapping):
            raise DocumentLoadError(f"Node description must be an object, got {type(item).__name__}")

        node_type = item.get("type")
        if node_type == "paragraph":
            return self._parse_paragraph(item)
        if node_type == "list_item":
            return self._parse_list_item(item)
        if node_type == "image":
            return self._parse_image(item)
        if node_type == "text":
            return self._parse_text(item)
        if node_type == "container":
            return ContainerNode(children=self._parse_children(item.get("children", [])))
        raise DocumentLoadError(f"Unknown node type: {node_type!r}")

    def _parse_paragraph(self, item: Mapping[str, Any]) -> ParagraphNode:
        raw_heading = item.get("heading", 0)
        try:
            heading = ParagraphHeading(int(raw_heading))
        except (TypeError, ValueError) as exc:
            raise DocumentLoadError(f"Invalid heading level: {raw_heading!r}") from exc
        return ParagraphNode(children=self._parse_children(item.get("children", [])), heading=heading)

    def _parse_list_item(self, item: Mapping[str, Any]) -> ListItemNode:
        raw_glyph = item.get("glyph_type", GlyphType.BULLET.value)
        try:
            glyph_type = GlyphType(str(raw_glyph).upper())
        except ValueError as exc:
            raise DocumentLoadError(f"Invalid glyph type: {raw_glyph!r}") from exc
        return ListItemNode(
            children=self._parse_children(item.get("children", [])),
            list_id=str(item.get("list_id", "")),
            nesting_level=self._get_int(item, "nesting_level"),
            glyph_type=glyph_type,
        )

    def _parse_image(self, item: Mapping[str, Any]) -> InlineImageNode:
        return InlineImageNode(
            data=self._read_image_data(item),
            content_type=str(item.get("content_type", "")),
            alt_title=self._optional_str(item, "alt"),
        )

    def _parse_text(self, item: Mapping[str, Any]) -> TextNode:
        raw_runs = item.get("runs", [])
        if not isinstance(raw_runs, list):
            raise DocumentLoadError("'runs' must be a list")
        runs = [self._parse_run(run) for run in raw_runs]
        return TextNode(text=str(item.get("text", "")), runs=runs)

    def _parse_run(self, run: Any) -> AttributeRun:
        if not isinstance(run, Mapping):
            raise DocumentLoadError(f"Attribute run must be an object, got {type(run).__name__}")
        attributes = TextAttributes(
            bold=bool(run.get("bold", False)),
            italic=bool(run.get("italic", False)),
            underline=bool(run.get("underline", False)),
            link_url=self._optional_str(run, "link_url"),
        )
        return AttributeRun(start=self._get_int(run, "start"), attributes=attributes)

    def _get_int(self, item: Mapping[str, Any], key: str) -> int:
        raw = item.get(key, 0)
        if isinstance(raw, bool):
            raise DocumentLoadError(f"Invalid {key}: {raw!r}")
        try:
            value = int(raw)
        except (TypeError, ValueError) as exc:
            raise DocumentLoadError(f"Invalid {key}: {raw!r}") from exc
        if value < 0:
            raise DocumentLoadError(f"Invalid {key}: {raw!r}")
        return value

    def _optional_str(self, item: Mapping[str, Any], key: str) -> Optional[str]:
        raw = item.get(key)
        if raw is not None and not isinstance(raw, str):
            raise DocumentLoadError(f"'{key}' must be a string, got {type(raw).__name__}")
        return raw

    def _read_image_data(self, item: Mapping[str, Any]) -> bytes:
        if "data" in item:
            try:
                return base64.b64decode(item["data"], validate=True)
            except (binascii.Error, ValueError, TypeError) as exc:
                raise DocumentLoadError(f"Image data is not valid base64: {exc}") from exc
        if "path" in item:
            image_path = Path(self._optional_str(item, "path") or "")
            if not image_path.is_absolute() and self._base_dir is not None:
                image_path = self._base_dir / image_path
            if not image_path.is_file():
                raise DocumentLoadError(f"Image file not found: {image_path}")
            return image_path.read_bytes()
        LOGGER.warning("Image node without 'data' or 'path'; using an empty payload")
        return b""


def load_document(payload: Dict[str, Any]) -> Document:
    """Convenience function to build a document from an in-memory payload."""
    return DocumentLoader().build(payload)
