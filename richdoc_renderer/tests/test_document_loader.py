"""Tests for building node trees from JSON descriptions."""
import base64
import json
import tempfile
import unittest
from pathlib import Path

from richdoc_renderer.model.elements import (
    ContainerNode,
    GlyphType,
    InlineImageNode,
    ListItemNode,
    NodeKind,
    ParagraphHeading,
    ParagraphNode,
    TextNode,
)
from richdoc_renderer.model.errors import DocumentLoadError
from richdoc_renderer.parser.document_loader import DocumentLoader, load_document

DOCUMENT = {
    "name": "Field Guide",
    "body": [
        {"type": "paragraph", "heading": 2, "children": [{"type": "text", "text": "Birds"}]},
        {
            "type": "list_item",
            "list_id": "kix.abc",
            "nesting_level": 1,
            "glyph_type": "number",
            "children": [
                {
                    "type": "text",
                    "text": "Robin redbreast",
                    "runs": [{"start": 0, "bold": True}, {"start": 6, "link_url": "https://birds.example/"}],
                }
            ],
        },
        {
            "type": "container",
            "children": [
                {
                    "type": "paragraph",
                    "children": [
                        {
                            "type": "image",
                            "content_type": "image/png",
                            "alt": "Robin",
                            "data": base64.b64encode(b"\x89PNG").decode("ascii"),
                        }
                    ],
                }
            ],
        },
    ],
}


class DocumentLoaderTest(unittest.TestCase):
    """Ensure descriptions map onto the expected node variants."""

    def setUp(self) -> None:
        self.document = load_document(DOCUMENT)

    def test_document_name_and_body(self) -> None:
        self.assertEqual(self.document.name, "Field Guide")
        self.assertIsInstance(self.document.body, ContainerNode)
        self.assertEqual(
            [child.kind for child in self.document.body.children],
            [NodeKind.PARAGRAPH, NodeKind.LIST_ITEM, NodeKind.CONTAINER],
        )

    def test_paragraph_heading(self) -> None:
        heading = self.document.body.get_child(0)
        assert isinstance(heading, ParagraphNode)
        self.assertEqual(heading.heading, ParagraphHeading.HEADING2)
        self.assertIsInstance(heading.get_child(0), TextNode)

    def test_list_item_fields_and_runs(self) -> None:
        item = self.document.body.get_child(1)
        assert isinstance(item, ListItemNode)
        self.assertEqual(item.list_id, "kix.abc")
        self.assertEqual(item.nesting_level, 1)
        self.assertEqual(item.glyph_type, GlyphType.NUMBER)

        text = item.get_child(0)
        assert isinstance(text, TextNode)
        self.assertEqual(text.attribute_indices, [0, 6])
        self.assertTrue(text.get_attributes(0).bold)
        self.assertEqual(text.get_attributes(8).link_url, "https://birds.example/")

    def test_image_payload_is_decoded(self) -> None:
        image = self.document.body.get_child(2).get_child(0).get_child(0)
        assert isinstance(image, InlineImageNode)
        self.assertEqual(image.data, b"\x89PNG")
        self.assertEqual(image.content_type, "image/png")
        self.assertEqual(image.alt_title, "Robin")

    def test_parents_are_linked(self) -> None:
        container = self.document.body.get_child(2)
        paragraph = container.get_child(0)
        self.assertIs(paragraph.parent, container)
        self.assertIs(container.parent, self.document.body)
        self.assertIs(self.document.body.get_child(0).next_sibling(), self.document.body.get_child(1))

    def test_sibling_positions_are_recorded(self) -> None:
        body = self.document.body
        self.assertEqual([child.index for child in body.children], [0, 1, 2])
        self.assertIsNone(body.index)
        self.assertIsNone(body.get_child(2).next_sibling())

        inserted = ContainerNode()
        body.children.insert(0, inserted)
        inserted.parent = body
        self.assertIs(body.get_child(1).next_sibling(), body.get_child(2))
        self.assertIs(inserted.next_sibling(), body.get_child(1))

    def test_invalid_descriptions(self) -> None:
        bad_payloads = [
            {"body": [{"type": "table"}]},
            {"body": [{"type": "paragraph", "heading": 9}]},
            {"body": [{"type": "list_item", "glyph_type": "star"}]},
            {"body": [{"type": "image", "content_type": "image/png", "data": "not base64!"}]},
            {"body": "paragraph"},
            {"body": ["text"]},
            {"name": 5, "body": []},
            {"body": [{"type": "list_item", "nesting_level": "deep"}]},
            {"body": [{"type": "list_item", "nesting_level": -1}]},
            {"body": [{"type": "text", "text": "x", "runs": ["bold"]}]},
            {"body": [{"type": "text", "text": "x", "runs": "bold"}]},
            {"body": [{"type": "text", "text": "ab", "runs": [{"start": "one"}]}]},
            {"body": [{"type": "text", "text": "ab", "runs": [{"start": 0, "link_url": 7}]}]},
            {"body": [{"type": "image", "content_type": "image/png", "data": "", "alt": 5}]},
            {"body": [{"type": "image", "content_type": "image/png", "data": "\u00e9t\u00e9"}]},
            {"body": [{"type": "image", "content_type": "image/png", "path": 3}]},
        ]
        for payload in bad_payloads:
            with self.assertRaises(DocumentLoadError, msg=repr(payload)):
                load_document(payload)


class DocumentLoaderFileTest(unittest.TestCase):

    def test_load_resolves_image_paths_next_to_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            (directory / "logo.gif").write_bytes(b"GIF89a")
            description = {"body": [{"type": "image", "content_type": "image/gif", "path": "logo.gif"}]}
            json_path = directory / "Team Notes.json"
            json_path.write_text(json.dumps(description), encoding="utf-8")

            document = DocumentLoader.load(json_path)

        self.assertEqual(document.name, "Team Notes")
        image = document.body.get_child(0)
        assert isinstance(image, InlineImageNode)
        self.assertEqual(image.data, b"GIF89a")

    def test_missing_image_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            json_path = Path(tmp) / "doc.json"
            json_path.write_text(
                json.dumps({"body": [{"type": "image", "content_type": "image/png", "path": "gone.png"}]}),
                encoding="utf-8",
            )
            with self.assertRaises(DocumentLoadError):
                DocumentLoader.load(json_path)

    def test_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            json_path = Path(tmp) / "doc.json"
            json_path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(DocumentLoadError):
                DocumentLoader.load(json_path)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
