"""Infer list containers from a flat sequence of list items."""
from __future__ import annotations

from typing import Dict, Iterator, Tuple

from richdoc_renderer.model.elements import GlyphType, ListItemNode
from richdoc_renderer.renderer.utils import list_container_tag

ListKey = Tuple[str, int]


class ListCounters:
    """Per-conversion count of items emitted for each (list id, nesting level)."""

    def __init__(self) -> None:
        self._counts: Dict[ListKey, int] = {}

    def count(self, list_id: str, nesting_level: int) -> int:
        return self._counts.get((list_id, nesting_level), 0)

    def increment(self, list_id: str, nesting_level: int) -> int:
        key = (list_id, nesting_level)
        self._counts[key] = self._counts.get(key, 0) + 1
        return self._counts[key]

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[ListKey]:
        return iter(self._counts)


def list_item_markup(counter: int, glyph_type: GlyphType, is_last: bool) -> Tuple[str, str]:
    """Return the prefix and suffix wrapped around a list item's content.

    The first item seen for a (list, level) pair opens the container and the
    last item of the list closes it.
    """
    tag = list_container_tag(glyph_type)
    if counter == 0:
        prefix = f'<{tag} class="list">\n\t<li>'
    else:
        prefix = "\t<li>"

    suffix = "</li>"
    if is_last:
        suffix += f"\n</{tag}>"
    return prefix, suffix


def track_list_item(item: ListItemNode, counters: ListCounters) -> Tuple[str, str]:
    """Decide the markup for ``item`` and record it as emitted."""
    counter = counters.count(item.list_id, item.nesting_level)
    markup = list_item_markup(counter, item.glyph_type, item.is_last_in_list())
    counters.increment(item.list_id, item.nesting_level)
    return markup
