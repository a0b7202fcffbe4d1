"""Domain layer - demo descriptors, results and the principles catalog."""

from .demo import DemoResult, PatternCategory, PatternDemo
from .principles import Principle, get_principle, list_principles

__all__ = [
    "DemoResult",
    "PatternCategory",
    "PatternDemo",
    "Principle",
    "get_principle",
    "list_principles",
]
