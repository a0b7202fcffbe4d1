"""Infrastructure registry patterns."""

from .pattern_registry import (
    PatternNames,
    PatternRegistry,
    get_pattern_registry,
    reset_pattern_registry,
)

__all__ = [
    'PatternNames',
    'PatternRegistry',
    'get_pattern_registry',
    'reset_pattern_registry',
]
