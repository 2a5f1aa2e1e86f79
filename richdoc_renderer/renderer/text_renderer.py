"""Render text nodes with flat attribute runs into nested inline HTML."""
from __future__ import annotations

from dataclasses import fields
from typing import List, Sequence

from richdoc_renderer.model.elements import TextAttributes, TextNode
from richdoc_renderer.model.errors import MalformedAttributeRuns
from richdoc_renderer.renderer.utils import inline_tags
from richdoc_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

URL_SCHEMES = ("http://", "https://")


def is_bare_url(text: str) -> bool:
    return text.strip().startswith(URL_SCHEMES)


def is_reference_marker(text: str) -> bool:
    """A span written as ``[...]`` is treated as a footnote reference."""
    trimmed = text.strip()
    return len(trimmed) >= 2 and trimmed.startswith("[") and trimmed.endswith("]")


def autolink(text: str) -> str:
    return f'<a href="{text}">{text}</a>'


def render_text(node: TextNode) -> str:
    """Render one text node.

    A node with at most one attribute run is formatted as a whole: bold text
    becomes ``<strong>``, fully italic text a ``<blockquote>``, and a bare URL
    an anchor. Otherwise each run is rendered separately.
    """
    indices = node.attribute_indices
    validate_indices(indices, len(node.text))

    if len(indices) <= 1:
        return _render_uniform(node)

    output: List[str] = []
    for position, start in enumerate(indices):
        end = indices[position + 1] if position + 1 < len(indices) else len(node.text)
        output.append(render_span(node.text[start:end], node.get_attributes(start)))
    return "".join(output)


def _render_uniform(node: TextNode) -> str:
    text = node.text
    if node.is_bold():
        return f"<strong>{text}</strong>"
    if node.is_italic():
        return f"<blockquote>{text}</blockquote>"
    if is_bare_url(text):
        return autolink(text)
    return text


def render_span(text: str, attributes: TextAttributes) -> str:
    """Wrap one span in its inline tags, closing them in reverse order."""
    LOGGER.debug("Rendering span %r", text)
    dump_attributes(attributes)
    tags = inline_tags(attributes)

    if is_reference_marker(text):
        body = f"<sup>{text}</sup>"
    elif is_bare_url(text):
        body = autolink(text)
    else:
        body = text

    opening = "".join(open_tag for open_tag, _ in tags)
    closing = "".join(close_tag for _, close_tag in reversed(tags))
    return f"{opening}{body}{closing}"


def validate_indices(indices: Sequence[int], text_length: int) -> None:
    """Fail fast when the offsets cannot describe spans of the text."""
    if not indices:
        return
    if indices[0] != 0:
        raise MalformedAttributeRuns(indices, text_length, "first offset must be 0")
    for previous, current in zip(indices, indices[1:]):
        if current <= previous:
            raise MalformedAttributeRuns(indices, text_length, "offsets must be strictly increasing")
    if len(indices) > 1 and indices[-1] >= text_length:
        raise MalformedAttributeRuns(indices, text_length, "offset beyond end of text")


def dump_attributes(attributes: TextAttributes) -> None:
    """Log every attribute of a run, one record per attribute."""
    for attribute in fields(attributes):
        LOGGER.debug("%s:%s", attribute.name, getattr(attributes, attribute.name))
