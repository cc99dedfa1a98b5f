"""Tests for the mobiledoc CLI."""

import os
import tempfile
import unittest

from typer.testing import CliRunner

from mobiledoc import (
    Atom,
    AtomMarker,
    Card,
    CardSection,
    Document,
    ImageSection,
    Markup,
    MarkupSection,
    TextMarker,
)
from mobiledoc.cli.main import app


def _document() -> Document:
    bold = Markup(tag="b")
    atom = Atom(name="mention", text="@bob")
    card = Card(name="card1")
    return Document(
        markups=[bold],
        atoms=[atom],
        cards=[card],
        sections=[
            CardSection(card=card),
            MarkupSection(
                markers=[
                    TextMarker(text=" then text "),
                    TextMarker(
                        open_markups=[bold], closed_markups=1, text="then marked up text "
                    ),
                    AtomMarker(atom=atom),
                ]
            ),
            ImageSection(source="http://example.com/foo.png"),
        ],
    )


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.path = os.path.join(self.tmp.name, "doc.json")
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(_document().model_dump_json())

    def test_render_with_card_placeholder(self):
        result = self.runner.invoke(app, ["render", self.path, "--card-placeholder"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            result.stdout,
            "[card:card1] then text then marked up text  http://example.com/foo.png ",
        )

    def test_render_with_atom_fallback(self):
        result = self.runner.invoke(
            app, ["render", self.path, "--card-placeholder", "--atom-fallback"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("then marked up text @bob http://example.com", result.stdout)

    def test_render_missing_card_fails(self):
        result = self.runner.invoke(app, ["render", self.path])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error:", result.output)
        self.assertIn("missing card renderer", result.output)

    def test_render_to_file(self):
        out = os.path.join(self.tmp.name, "out", "doc.txt")
        result = self.runner.invoke(
            app, ["render", self.path, "--card-placeholder", "--output", out]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Wrote", result.output)
        with open(out, "r", encoding="utf-8") as f:
            self.assertTrue(f.read().startswith("[card:card1] then text"))

    def test_render_unreadable_document(self):
        result = self.runner.invoke(
            app, ["render", os.path.join(self.tmp.name, "missing.json")]
        )
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error:", result.output)

    def test_verbose_render(self):
        result = self.runner.invoke(
            app, ["--verbose", "render", self.path, "--card-placeholder"]
        )
        self.assertEqual(result.exit_code, 0, result.output)

    def test_verbose_enables_marker_tracing(self):
        with self.assertLogs("mobiledoc.rendering.renderer", level="DEBUG") as cm:
            result = self.runner.invoke(
                app, ["--verbose", "render", self.path, "--card-placeholder"]
            )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(any("mobiledoc.render.marker" in m for m in cm.output))

    def test_marker_tracing_off_without_verbose(self):
        with self.assertLogs("mobiledoc.rendering.renderer", level="DEBUG") as cm:
            result = self.runner.invoke(
                app, ["render", self.path, "--card-placeholder"]
            )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertFalse(any("mobiledoc.render.marker" in m for m in cm.output))

    def test_inspect(self):
        result = self.runner.invoke(app, ["inspect", self.path])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Sections:", result.output)
        self.assertIn("CARD", result.output)
        self.assertIn("MARKUP", result.output)
        self.assertIn("IMAGE", result.output)
        self.assertNotIn("Warning", result.output)


if __name__ == "__main__":
    unittest.main()
