import os
import tempfile
import unittest

from mobiledoc import (
    Card,
    CardSection,
    Document,
    DocumentLoadError,
    MarkupSection,
    MissingRenderer,
    TextMarker,
    TextRenderer,
)
from mobiledoc.rendering.exporter import load_document, render_to_file, render_to_string


class TestExporter(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.doc = Document(
            sections=[MarkupSection(markers=[TextMarker(text="hello "), TextMarker(text="world")])]
        )

    def _write(self, name: str, content: str) -> str:
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_load_document(self):
        path = self._write("doc.json", self.doc.model_dump_json())
        self.assertEqual(load_document(path), self.doc)

    def test_load_missing_file(self):
        with self.assertRaises(DocumentLoadError) as cm:
            load_document(os.path.join(self.tmp.name, "nope.json"))
        self.assertTrue(cm.exception.path.endswith("nope.json"))

    def test_load_invalid_document(self):
        path = self._write("bad.json", '{"sections": [{"type": 2}]}')
        with self.assertRaises(DocumentLoadError):
            load_document(path)

    def test_load_invalid_json(self):
        path = self._write("bad.json", "{not json")
        with self.assertRaises(DocumentLoadError):
            load_document(path)

    def test_render_to_string(self):
        self.assertEqual(render_to_string(self.doc), "hello world")

    def test_render_to_file_creates_parents(self):
        out = os.path.join(self.tmp.name, "nested", "out.txt")
        self.assertEqual(render_to_file(self.doc, out), out)
        with open(out, "rb") as f:
            self.assertEqual(f.read(), b"hello world")

    def test_render_to_file_propagates_errors(self):
        card = Card(name="c")
        doc = Document(cards=[card], sections=[CardSection(card=card)])
        out = os.path.join(self.tmp.name, "out.txt")
        with self.assertRaises(MissingRenderer):
            render_to_file(doc, out, TextRenderer())


if __name__ == "__main__":
    unittest.main()
