"""Program version information."""

from __future__ import annotations

import platform
from dataclasses import dataclass, field
from datetime import datetime

__all__ = ["Version", "get_version"]


def _ansic(timestamp: int) -> str:
    moment = datetime.fromtimestamp(timestamp)
    return f"{moment:%a %b} {moment.day:>2} {moment:%H:%M:%S %Y}"


@dataclass
class Version:
    """Name, version number and build details of the program."""

    name: str = "Honyakusha"
    number: str = "1.0.0"
    python_version: str = field(default_factory=platform.python_version)
    git_commit: str = ""
    built_time: int = 0
    os: str = field(default_factory=lambda: platform.system().lower())
    arch: str = field(default_factory=lambda: platform.machine().lower())

    def info(self) -> str:
        """Return a multi-line, human-readable description."""
        built = _ansic(self.built_time) if self.built_time else ""
        return (
            f"Name:        {self.name}\n"
            f"Version:     {self.number}\n"
            f"Python:      {self.python_version}\n"
            f"Git Commit:  {self.git_commit}\n"
            f"Built:       {built}\n"
            f"OS/Arch:     {self.os}/{self.arch}\n"
        )


_VERSION = Version()


def get_version() -> Version:
    """Return the program's version record."""
    return _VERSION