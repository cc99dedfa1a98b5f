"""
Debug helpers for seeing how markers open and close markups.

These utilities are intended for troubleshooting documents whose markup
bracketing looks off. They never render extensions and can be safely used in
tests.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..models import (
    AtomMarker,
    Document,
    ListSection,
    Marker,
    MarkerType,
    MarkupSection,
    SectionType,
)
from .markup_stack import MarkupStack


def _enum_name(enum_cls, value: Optional[int]) -> str:
    if value is None:
        return "(none)"
    try:
        return enum_cls(int(value)).name
    except ValueError:
        return str(value)


def trace_markers(
    markers: Sequence[Marker], *, section: int = 0, item: Optional[int] = None
) -> List[Dict[str, object]]:
    """Return one dict per marker describing its markup bookkeeping.

    Each dict contains:
      - section, item, index: position of the marker
      - type: marker type name
      - text: marker text (atom text for atoms)
      - opened: tags opened before the marker
      - closing: closed_markups as declared
      - depth_before, depth_after: stack depth around the marker
      - over_closed: whether closing exceeded the open depth
    """
    stack = MarkupStack()
    out: List[Dict[str, object]] = []
    for idx, marker in enumerate(markers):
        depth_before = stack.depth
        for markup in marker.open_markups:
            stack.push(markup)
        open_depth = stack.depth
        stack.pop(marker.closed_markups)
        text = marker.atom.text if isinstance(marker, AtomMarker) else marker.text
        out.append(
            {
                "section": section,
                "item": item,
                "index": idx,
                "type": _enum_name(MarkerType, marker.type),
                "text": text,
                "opened": [m.tag for m in marker.open_markups],
                "closing": marker.closed_markups,
                "depth_before": depth_before,
                "depth_after": stack.depth,
                "over_closed": marker.closed_markups > open_depth,
            }
        )
    return out


def trace_document(doc: Document) -> List[Dict[str, object]]:
    """Trace every marker sequence in ``doc`` (sections and list items)."""
    rows: List[Dict[str, object]] = []
    for s_idx, section in enumerate(doc.sections):
        if isinstance(section, MarkupSection):
            rows.extend(trace_markers(section.markers, section=s_idx))
        elif isinstance(section, ListSection):
            for i_idx, item in enumerate(section.items):
                rows.extend(trace_markers(item, section=s_idx, item=i_idx))
    return rows


def section_summary(doc: Document) -> List[str]:
    """Short one-line description of each section, in order."""
    lines = []
    for idx, section in enumerate(doc.sections):
        name = _enum_name(SectionType, section.type)
        lines.append(f"[{idx:03d}] {name}")
    return lines


def dump_trace_text(doc: Document) -> str:
    """Return a human-readable dump of the marker trace."""
    rows = []
    for row in trace_document(doc):
        pretty = str(row["text"]).replace("\n", "⏎\n")
        item = "-" if row["item"] is None else row["item"]
        flag = " OVER-CLOSED" if row["over_closed"] else ""
        rows.append(
            f"[{row['section']:03d}/{item!s:<2}/{row['index']:03d}] "
            f"{row['type']:<5} depth={row['depth_before']}->{row['depth_after']} "
            f"open={','.join(row['opened']) or '-'} close={row['closing']}{flag} "  # type: ignore[arg-type]
            f"text=“{pretty}”"
        )
    return "\n".join(rows)
