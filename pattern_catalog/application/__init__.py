"""Application layer - use cases over the pattern registry."""

from .demo_runner import DemoRunner

__all__ = ["DemoRunner"]
