"""Process-wide string properties used to select the active driver."""

from __future__ import annotations

import threading
from typing import Dict, Optional

DRIVER_IMPL_PROPERTY = "playwright.driver.impl"

# Re-entrant so callers can hold it across a read-then-write sequence.
lock = threading.RLock()

_properties: Dict[str, str] = {}


def get_property(key: str, default: Optional[str] = None) -> Optional[str]:
    with lock:
        return _properties.get(key, default)


def set_property(key: str, value: str) -> Optional[str]:
    """Set ``key`` and return the value it replaced."""
    if not isinstance(value, str):
        raise TypeError(f"Property {key!r} must be a string, got {type(value).__name__}")
    with lock:
        previous = _properties.get(key)
        _properties[key] = value
        return previous


def clear_property(key: str) -> Optional[str]:
    with lock:
        return _properties.pop(key, None)


def swap_property(key: str, value: Optional[str]) -> Optional[str]:
    """
    Replace ``key`` with ``value`` (or remove it when ``value`` is None) and
    return the previous value in a single locked step.
    """
    with lock:
        if value is None:
            return clear_property(key)
        return set_property(key, value)
