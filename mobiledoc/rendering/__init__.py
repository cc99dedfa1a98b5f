"""Plain-text rendering of mobiledoc documents.

Contains:
- renderer_iface: writer and atom/card callback signatures
- registry: name → renderer tables for atoms and cards
- markup_stack: open-markup bookkeeping for one marker sequence
- renderer: the section/marker walk (TextRenderer)
- exporter: string/file helpers and JSON document loading
"""
