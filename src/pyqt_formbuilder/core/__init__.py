"""
Core PyQt6 utilities.

Foundational helpers with no form-specific logic.
"""

from .debounce_timer import DebounceTimer

__all__ = [
    "DebounceTimer",
]
