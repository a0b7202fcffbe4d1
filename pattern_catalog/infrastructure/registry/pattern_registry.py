"""Pattern Registry - Registry pattern for pattern demo descriptors.

The registry maps a pattern name to its PatternDemo. Entries keep the order
in which they were registered, so listing and running all demos follows the
declaration order of the catalog.
"""

import threading
from typing import Dict, Iterator

from pattern_catalog.domain.base.exceptions import (
    DuplicateKeyError,
    NotFoundError,
    ValidationError,
)
from pattern_catalog.domain.demo import PatternDemo
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.patterns.singleton_holder import SingletonHolder


class PatternNames:
    """Restartable view over the registered names, in insertion order."""

    def __init__(self, registrations: Dict[str, PatternDemo]):
        self._registrations = registrations

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._registrations.keys()))

    def __len__(self) -> int:
        return len(self._registrations)

    def __repr__(self) -> str:
        return f"PatternNames({list(self)!r})"


class PatternRegistry:
    """
    Registry for pattern demos.

    Registration is guarded by a lock. An entry is never replaced once added.
    """

    def __init__(self):
        """Initialize pattern registry."""
        self._registrations: Dict[str, PatternDemo] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, name: str, demo: PatternDemo) -> None:
        """
        Register a pattern demo under ``name``.

        Args:
            name: Unique, non-empty pattern name; must equal ``demo.name``
            demo: Demo descriptor

        Raises:
            ValidationError: If the name is empty or does not match the demo
            DuplicateKeyError: If the name is already registered
        """
        if not name or not name.strip():
            raise ValidationError("Pattern name must not be empty")
        if name != demo.name:
            raise ValidationError(
                f"Registration name '{name}' does not match demo name '{demo.name}'"
            )

        with self._registry_lock:
            if name in self._registrations:
                self.logger.error(f"Duplicate pattern registration: {name}")
                raise DuplicateKeyError("Pattern", name)

            self._registrations[name] = demo

        self.logger.debug(f"Registered pattern: {name}", category=demo.category.value)

    def get(self, name: str) -> PatternDemo:
        """
        Get the demo registered under ``name``.

        Raises:
            NotFoundError: If the name is not registered
        """
        try:
            return self._registrations[name]
        except KeyError:
            raise NotFoundError("Pattern", name) from None

    def list(self) -> PatternNames:
        """Registered names in insertion order; iterable any number of times."""
        return PatternNames(self._registrations)

    def demos(self) -> Iterator[PatternDemo]:
        """Registered demos in insertion order."""
        for name in self.list():
            yield self._registrations[name]

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    def clear_registrations(self) -> None:
        """Remove every registration (test support)."""
        with self._registry_lock:
            self._registrations.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._registrations

    def __len__(self) -> int:
        return len(self._registrations)

    def __repr__(self) -> str:
        return f"PatternRegistry(patterns={list(self.list())!r})"


def _create_default_registry() -> PatternRegistry:
    # Imported here to avoid a circular import with the demo modules
    from pattern_catalog.patterns.registration import register_all_patterns

    registry = PatternRegistry()
    register_all_patterns(registry)
    return registry


_registry_holder: SingletonHolder[PatternRegistry] = SingletonHolder(_create_default_registry)


def get_pattern_registry() -> PatternRegistry:
    """Get the process-wide registry, populated with the default demos on first access."""
    return _registry_holder.get()


def reset_pattern_registry() -> None:
    """Drop the process-wide registry so the next access rebuilds it."""
    _registry_holder.reset()
