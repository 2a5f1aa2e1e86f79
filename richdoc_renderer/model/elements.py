"""In-memory representation of a rich-text document tree."""
from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import ClassVar, List, Optional


class NodeKind(Enum):
    """Discriminant carried by every node variant."""

    PARAGRAPH = "paragraph"
    LIST_ITEM = "list_item"
    INLINE_IMAGE = "image"
    TEXT = "text"
    CONTAINER = "container"


class ParagraphHeading(IntEnum):
    """Heading rank of a paragraph; NORMAL marks a body paragraph."""

    NORMAL = 0
    HEADING1 = 1
    HEADING2 = 2
    HEADING3 = 3
    HEADING4 = 4
    HEADING5 = 5
    HEADING6 = 6


class GlyphType(Enum):
    """Marker style of a list item."""

    BULLET = "BULLET"
    HOLLOW_BULLET = "HOLLOW_BULLET"
    SQUARE_BULLET = "SQUARE_BULLET"
    NUMBER = "NUMBER"
    LATIN_UPPER = "LATIN_UPPER"
    LATIN_LOWER = "LATIN_LOWER"
    ROMAN_UPPER = "ROMAN_UPPER"
    ROMAN_LOWER = "ROMAN_LOWER"


@dataclass(frozen=True, slots=True)
class TextAttributes:
    """Formatting attributes shared by one attribute run."""

    bold: bool = False
    italic: bool = False
    underline: bool = False
    link_url: Optional[str] = None


@dataclass(frozen=True, slots=True)
class AttributeRun:
    """Start offset of a contiguous span and the attributes active from there."""

    start: int
    attributes: TextAttributes = field(default_factory=TextAttributes)


@dataclass(eq=False, slots=True)
class Node:
    """Base node: ordered children plus navigation towards parent and siblings."""

    kind: ClassVar[NodeKind] = NodeKind.CONTAINER

    children: List["Node"] = field(default_factory=list)
    parent: Optional["Node"] = field(default=None, repr=False)
    # Position within parent.children, assigned by link_children
    index: Optional[int] = field(default=None, repr=False)

    @property
    def num_children(self) -> int:
        return len(self.children)

    def get_child(self, index: int) -> "Node":
        return self.children[index]

    def next_sibling(self) -> Optional["Node"]:
        if self.parent is None:
            return None
        siblings = self.parent.children
        position = self.index
        if position is None or position >= len(siblings) or siblings[position] is not self:
            position = next((i for i, sibling in enumerate(siblings) if sibling is self), None)
            if position is None:
                return None
            self.index = position
        return siblings[position + 1] if position + 1 < len(siblings) else None

    def is_at_document_end(self) -> bool:
        """True when nothing follows this node anywhere in the document."""
        node: Optional[Node] = self
        while node is not None:
            if node.next_sibling() is not None:
                return False
            node = node.parent
        return True

    def link_children(self) -> None:
        """Point every descendant's ``parent`` at its container."""
        for position, child in enumerate(self.children):
            child.parent = self
            child.index = position
            child.link_children()


@dataclass(eq=False, slots=True)
class ContainerNode(Node):
    """Generic node that only groups children (body, table, cell)."""

    kind: ClassVar[NodeKind] = NodeKind.CONTAINER


@dataclass(eq=False, slots=True)
class ParagraphNode(Node):
    """Body paragraph or heading."""

    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH

    heading: ParagraphHeading = ParagraphHeading.NORMAL


@dataclass(eq=False, slots=True)
class ListItemNode(Node):
    """List item; list membership is carried by ``list_id`` and ``nesting_level``."""

    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM

    list_id: str = ""
    nesting_level: int = 0
    glyph_type: GlyphType = GlyphType.BULLET

    def is_last_in_list(self) -> bool:
        if self.is_at_document_end():
            return True
        sibling = self.next_sibling()
        return sibling is not None and sibling.kind is not NodeKind.LIST_ITEM


@dataclass(eq=False, slots=True)
class InlineImageNode(Node):
    """Embedded image with its raw payload."""

    kind: ClassVar[NodeKind] = NodeKind.INLINE_IMAGE

    data: bytes = b""
    content_type: str = ""
    alt_title: Optional[str] = None


@dataclass(eq=False, slots=True)
class TextNode(Node):
    """Text with formatting encoded as a flat list of attribute runs."""

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    text: str = ""
    runs: List[AttributeRun] = field(default_factory=list)

    @property
    def attribute_indices(self) -> List[int]:
        return [run.start for run in self.runs]

    def get_attributes(self, offset: int) -> TextAttributes:
        """Return the attribute set active at ``offset``."""
        position = bisect_right(self.attribute_indices, offset) - 1
        if position < 0:
            return TextAttributes()
        return self.runs[position].attributes

    def is_bold(self) -> bool:
        return bool(self.runs) and all(run.attributes.bold for run in self.runs)

    def is_italic(self) -> bool:
        return bool(self.runs) and all(run.attributes.italic for run in self.runs)


@dataclass(eq=False, slots=True)
class Document:
    """A named document whose body holds the top-level nodes."""

    name: str
    body: ContainerNode = field(default_factory=ContainerNode)

    def __post_init__(self) -> None:
        self.body.parent = None
        self.body.link_children()
