"""Configuration file lookup and parsing."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import platformdirs

__all__ = [
    "Conf",
    "ConfError",
    "TranslateConf",
    "TranslatorConf",
    "TranslatorsConf",
    "file_path",
    "load",
    "load_from_file",
    "parse_conf",
]

CONF_FILE_NAME = "honyakusha.toml"


class ConfError(Exception):
    """The configuration could not be read or parsed."""


@dataclass
class TranslatorConf:
    """Settings for one translation service."""

    enabled: bool = False
    proxy: str = ""
    uri: str = ""
    api_key: str = ""


@dataclass
class TranslatorsConf:
    """Settings for every supported translation service."""

    bing: TranslatorConf = field(default_factory=TranslatorConf)
    google: TranslatorConf = field(default_factory=TranslatorConf)
    deepl_api: TranslatorConf = field(default_factory=TranslatorConf)
    libretranslate_api: TranslatorConf = field(default_factory=TranslatorConf)


@dataclass
class TranslateConf:
    """Default source and target languages."""

    source: str = ""
    target: str = ""


@dataclass
class Conf:
    """The whole configuration."""

    translate: TranslateConf = field(default_factory=TranslateConf)
    translators: TranslatorsConf = field(default_factory=TranslatorsConf)


def _table(parent: dict[str, Any], key: str) -> dict[str, Any]:
    value = parent.get(key, {})
    if not isinstance(value, dict):
        raise ConfError(f"`{key}' must be a table")
    return value


def _string(table: dict[str, Any], key: str) -> str:
    value = table.get(key, "")
    if not isinstance(value, str):
        raise ConfError(f"`{key}' must be a string")
    return value


def _boolean(table: dict[str, Any], key: str) -> bool:
    value = table.get(key, False)
    if not isinstance(value, bool):
        raise ConfError(f"`{key}' must be a boolean")
    return value


def _translator(table: dict[str, Any]) -> TranslatorConf:
    # TOML keys are the field names with hyphens in place of underscores.
    values: dict[str, Any] = {}
    for spec in fields(TranslatorConf):
        toml_key = spec.name.replace("_", "-")
        if isinstance(spec.default, bool):
            values[spec.name] = _boolean(table, toml_key)
        else:
            values[spec.name] = _string(table, toml_key)
    return TranslatorConf(**values)


def parse_conf(data: str | bytes) -> Conf:
    """Parse TOML configuration text; unknown keys are ignored."""
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ConfError(str(exc)) from exc
    try:
        doc = tomllib.loads(data)
    except tomllib.TOMLDecodeError as exc:
        raise ConfError(str(exc)) from exc

    translate = _table(doc, "translate")
    translators = _table(doc, "translators")
    return Conf(
        translate=TranslateConf(
            source=_string(translate, "source"),
            target=_string(translate, "target"),
        ),
        translators=TranslatorsConf(
            bing=_translator(_table(translators, "bing")),
            google=_translator(_table(translators, "google")),
            deepl_api=_translator(_table(translators, "deepl-api")),
            libretranslate_api=_translator(_table(translators, "libretranslate-api")),
        ),
    )


def file_path() -> Path | None:
    """Return the configuration file to use, or None if there is none.

    A file in the working directory wins over one in the user's
    configuration directory.
    """
    try:
        candidate = Path.cwd() / CONF_FILE_NAME
    except OSError:
        candidate = None
    if candidate is not None and candidate.exists():
        return candidate

    candidate = Path(platformdirs.user_config_path()) / CONF_FILE_NAME
    if candidate.exists():
        return candidate
    return None


def load_from_file(path: str | Path) -> Conf:
    """Read and parse the configuration file at ``path``."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ConfError(str(exc)) from exc
    return parse_conf(data)


def load() -> Conf:
    """Load the configuration file if one exists, otherwise the defaults."""
    path = file_path()
    if path is not None:
        return load_from_file(path)
    return Conf()