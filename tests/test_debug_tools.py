import unittest

from mobiledoc import (
    Atom,
    AtomMarker,
    Document,
    ImageSection,
    ListSection,
    Markup,
    MarkupSection,
    TextMarker,
)
from mobiledoc.rendering.debug_tools import (
    dump_trace_text,
    section_summary,
    trace_document,
    trace_markers,
)


class TestDebugTools(unittest.TestCase):
    def setUp(self):
        self.b = Markup(tag="b")
        self.i = Markup(tag="i")
        self.atom = Atom(name="mention", text="@bob")
        self.doc = Document(
            markups=[self.b, self.i],
            atoms=[self.atom],
            sections=[
                MarkupSection(
                    markers=[
                        TextMarker(open_markups=[self.b, self.i], text="x"),
                        AtomMarker(closed_markups=2, atom=self.atom),
                        TextMarker(closed_markups=1, text="y"),
                    ]
                ),
                ImageSection(source="foo.png"),
                ListSection(items=[[TextMarker(text="one")], [TextMarker(text="two")]]),
            ],
        )

    def test_trace_markers_depths(self):
        rows = trace_markers(self.doc.sections[0].markers)
        self.assertEqual([r["depth_before"] for r in rows], [0, 2, 0])
        self.assertEqual([r["depth_after"] for r in rows], [2, 0, 0])
        self.assertEqual(rows[0]["opened"], ["b", "i"])
        self.assertEqual(rows[1]["type"], "ATOM")
        self.assertEqual(rows[1]["text"], "@bob")
        self.assertEqual([r["over_closed"] for r in rows], [False, False, True])

    def test_trace_document_covers_list_items(self):
        rows = trace_document(self.doc)
        self.assertEqual(len(rows), 5)
        self.assertEqual([(r["section"], r["item"]) for r in rows[3:]], [(2, 0), (2, 1)])
        self.assertIsNone(rows[0]["item"])

    def test_section_summary(self):
        self.assertEqual(
            section_summary(self.doc), ["[000] MARKUP", "[001] IMAGE", "[002] LIST"]
        )

    def test_dump_trace_text_flags_over_close(self):
        text = dump_trace_text(self.doc)
        lines = text.splitlines()
        self.assertEqual(len(lines), 5)
        self.assertIn("OVER-CLOSED", lines[2])
        self.assertNotIn("OVER-CLOSED", lines[0])
        self.assertIn("open=b,i", lines[0])


if __name__ == "__main__":
    unittest.main()
