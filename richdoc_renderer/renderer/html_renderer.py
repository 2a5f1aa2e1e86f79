"""Render a document tree into sanitized HTML plus extracted images."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, cast

from richdoc_renderer.model.document_model import ConversionResult, ImageRecord
from richdoc_renderer.model.elements import (
    Document,
    InlineImageNode,
    ListItemNode,
    Node,
    NodeKind,
    ParagraphNode,
    TextNode,
)
from richdoc_renderer.renderer.image_extractor import ImageExtractor
from richdoc_renderer.renderer.list_tracker import ListCounters, track_list_item
from richdoc_renderer.renderer.text_renderer import render_text
from richdoc_renderer.renderer.utils import block_tags
from richdoc_renderer.utils.config import RendererSettings
from richdoc_renderer.utils.logger import get_logger
from richdoc_renderer.utils.sanitizer import OutputSanitizer

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class ConversionContext:
    """Mutable state of a single conversion, threaded through the tree walk."""

    extractor: ImageExtractor
    list_counters: ListCounters = field(default_factory=ListCounters)
    images: List[ImageRecord] = field(default_factory=list)

    @classmethod
    def for_document(cls, document: Document, settings: RendererSettings) -> "ConversionContext":
        return cls(extractor=ImageExtractor(document.name, settings.asset_base_url))


class HtmlRenderer:
    """Walks a document depth-first and assembles clean HTML.

    The renderer holds only settings; a :class:`ConversionContext` is created
    for each call to :meth:`render` and passed down the recursion.
    """

    def __init__(self, settings: Optional[RendererSettings] = None) -> None:
        self._settings = settings or RendererSettings()
        self._sanitizer = OutputSanitizer()

    def render(self, document: Document) -> ConversionResult:
        """Convert ``document``; any conversion error aborts with no result."""
        context = ConversionContext.for_document(document, self._settings)

        output = [self.render_node(child, context) for child in document.body.children]
        html = self._sanitizer.sanitize(self._settings.line_separator.join(output))

        LOGGER.info(
            "Converted %s: %d top-level elements, %d images, %d characters",
            document.name,
            document.body.num_children,
            len(context.images),
            len(html),
        )
        return ConversionResult(document_name=document.name, html=html, images=context.images)

    def render_node(self, node: Node, context: ConversionContext) -> str:
        """Render ``node`` and its subtree as prefix, children, suffix."""
        LOGGER.debug("Visiting %s node", node.kind.value)
        prefix = suffix = ""

        if node.kind is NodeKind.PARAGRAPH:
            if node.num_children == 0:
                return ""
            prefix, suffix = block_tags(cast(ParagraphNode, node).heading)
        elif node.kind is NodeKind.LIST_ITEM:
            prefix, suffix = track_list_item(cast(ListItemNode, node), context.list_counters)
        elif node.kind is NodeKind.INLINE_IMAGE:
            return context.extractor.extract(cast(InlineImageNode, node), context.images)
        elif node.kind is NodeKind.TEXT:
            return render_text(cast(TextNode, node))

        parts = [prefix]
        for child in node.children:
            parts.append(self.render_node(child, context))
        parts.append(suffix)
        return "".join(parts)


def convert_document(document: Document, settings: Optional[RendererSettings] = None) -> ConversionResult:
    """Render ``document`` with a fresh renderer."""
    return HtmlRenderer(settings).render(document)
