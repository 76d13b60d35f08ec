"""Small text helpers."""

from __future__ import annotations

__all__ = ["split_text_into_array"]


def split_text_into_array(text: str) -> list[str]:
    """Split text into its non-blank lines, each stripped of whitespace."""
    return [line for line in (raw.strip() for raw in text.strip().split("\n")) if line]