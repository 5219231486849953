"""
Label/value extraction for composite detail blocks.

A booking renders each field as a small block whose full text is the
label followed by the value (``"Phone: 555-0100"``). The label lives in
its own element, so the value is whatever remains of the full text once
the label text is removed.

Blocks are associated with labels by the label's own text, never by the
order in which they happen to be rendered.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from roominglist.errors import ExtractionMismatch

EMPTY_VALUE = "[Empty Value]"


@dataclass(frozen=True)
class LabeledText:
    """Text captured from one sub-block: its label element and its full text."""

    label: str | None
    text: str | None


def normalize_label(label: str | None) -> str:
    """Canonical form used to compare a rendered label with an expected one."""
    return (label or "").strip().rstrip(":").strip().casefold()


def split_labeled_text(text: str | None, label: str | None) -> str:
    """
    Remove the first occurrence of the label from the full text.

    Returns:
        The trimmed value, or ``EMPTY_VALUE`` when nothing remains.
    """
    value = (text or "").replace(label or "", "", 1).strip()
    return value or EMPTY_VALUE


def extract_labeled_fields(
    blocks: Iterable[LabeledText], labels: Sequence[str]
) -> dict[str, str]:
    """
    Map each expected label to the value rendered next to it.

    Args:
        blocks: Captured sub-blocks in document order.
        labels: Expected labels; the result preserves this order.

    Returns:
        Dict of label -> value. Labels missing from the markup, or rendered
        without a value, map to ``EMPTY_VALUE``.

    Raises:
        ExtractionMismatch: A rendered label is not expected, or is
            rendered more than once.
    """
    expected = {normalize_label(label): label for label in labels}
    values = {label: EMPTY_VALUE for label in labels}
    seen: set[str] = set()

    for block in blocks:
        key = normalize_label(block.label)
        if key not in expected:
            raise ExtractionMismatch(
                f"Unexpected label {block.label!r}; expected one of {list(labels)}"
            )
        if key in seen:
            raise ExtractionMismatch(f"Label {block.label!r} rendered more than once")
        seen.add(key)
        values[expected[key]] = split_labeled_text(block.text, block.label)

    return values
