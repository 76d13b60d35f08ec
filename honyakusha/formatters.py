"""Render translation results as plain text or JSON."""

from __future__ import annotations

import json

from .res import Res
from .textutil import split_text_into_array

__all__ = ["format_json", "format_plain"]

_INDENT = "    "

# Characters that are escaped inside JSON strings so the output is safe to
# embed in HTML.
_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def format_json(res: Res) -> str:
    """Return ``res`` as indented JSON followed by a newline."""
    data = json.dumps(res.to_dict(), indent=4, ensure_ascii=False)
    return data.translate(_JSON_ESCAPES) + "\n"


def _indent(text: str) -> str:
    return "\n".join(_INDENT + line for line in split_text_into_array(text))


def format_plain(res: Res) -> str:
    """Return ``res`` as human-readable text."""
    if res.code != 0:
        return res.error + "\n"

    sections = ["Raw:\n\n" + _indent(res.text) + "\n"]
    for result in res.translators:
        body = result.error if result.code != 0 else result.translated_text
        sections.append("\n" + result.translator_name + ":\n\n" + _indent(body) + "\n")
    return "".join(sections)