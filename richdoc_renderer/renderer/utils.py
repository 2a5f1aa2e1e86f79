"""Tag tables shared by renderer implementations."""
from __future__ import annotations

from typing import Dict, Tuple

from richdoc_renderer.model.elements import GlyphType, ParagraphHeading, TextAttributes

HEADING_TAGS: Dict[ParagraphHeading, str] = {
    ParagraphHeading.HEADING1: "h1",
    ParagraphHeading.HEADING2: "h2",
    ParagraphHeading.HEADING3: "h3",
    ParagraphHeading.HEADING4: "h4",
    ParagraphHeading.HEADING5: "h5",
    ParagraphHeading.HEADING6: "h6",
}
PARAGRAPH_TAG = "p"

BULLET_GLYPHS = frozenset({GlyphType.BULLET, GlyphType.HOLLOW_BULLET, GlyphType.SQUARE_BULLET})


def block_tags(heading: ParagraphHeading) -> Tuple[str, str]:
    """Return the opening and closing tag for a paragraph of the given rank."""
    tag = HEADING_TAGS.get(heading, PARAGRAPH_TAG)
    return f"<{tag}>", f"</{tag}>"


def list_container_tag(glyph_type: GlyphType) -> str:
    """Bullet glyphs become unordered lists, everything else ordered."""
    return "ul" if glyph_type in BULLET_GLYPHS else "ol"


def inline_tags(attributes: TextAttributes) -> Tuple[Tuple[str, str], ...]:
    """Return (open, close) pairs in nesting order: italic, bold, underline, link.

    Underline has no HTML counterpart and contributes empty strings.
    """
    pairs = []
    if attributes.italic:
        pairs.append(("<em>", "</em>"))
    if attributes.bold:
        pairs.append(("<strong>", "</strong>"))
    if attributes.underline:
        pairs.append(("", ""))
    if attributes.link_url:
        pairs.append((f'<a href="{attributes.link_url}">', "</a>"))
    return tuple(pairs)
