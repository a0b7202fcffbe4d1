"""Infrastructure patterns package."""

from .singleton_holder import SingletonHolder

__all__ = ["SingletonHolder"]
