"""Process-wide debug switch."""

from __future__ import annotations

__all__ = ["enable_debug_mode", "is_debug_mode"]

_state: dict[str, bool] = {"debug": False}


def enable_debug_mode() -> None:
    """Turn debug mode on for the rest of the process."""
    _state["debug"] = True


def is_debug_mode() -> bool:
    """Return whether debug mode is on."""
    return _state["debug"]