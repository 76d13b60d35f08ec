"""Translation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "Res",
    "TranslatorResult",
    "res_failure",
    "res_success",
    "translator_failure",
    "translator_success",
]


@dataclass
class TranslatorResult:
    """The outcome of one translation service."""

    code: int = 0
    error: str = ""
    translated_text: str = ""
    translator_code: str = ""
    translator_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the result in its serialised shape."""
        return {
            "translator": {"code": self.translator_code, "name": self.translator_name},
            "code": self.code,
            "error": self.error,
            "translatedText": self.translated_text,
        }


@dataclass
class Res:
    """The overall outcome of translating a text."""

    code: int = 0
    error: str = ""
    text: str = ""
    translators: list[TranslatorResult] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the result in its serialised shape."""
        return {
            "code": self.code,
            "error": self.error,
            "text": self.text,
            "translators": [t.to_dict() for t in self.translators],
        }


def res_success(text: str) -> Res:
    """A successful result for ``text`` with no translator results yet."""
    return Res(code=0, text=text)


def res_failure(message: str) -> Res:
    """A failed result carrying ``message``."""
    return Res(code=1, error=message)


def translator_success(text: str) -> TranslatorResult:
    """A successful translator result."""
    return TranslatorResult(code=0, translated_text=text)


def translator_failure(message: str) -> TranslatorResult:
    """A failed translator result carrying ``message``."""
    return TranslatorResult(code=1, error=message)