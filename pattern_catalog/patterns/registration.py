"""Pattern Registration - register the catalog's demos with a pattern registry."""

from typing import TYPE_CHECKING, Tuple

from pattern_catalog.domain.demo import PatternDemo
from pattern_catalog.patterns import (
    adapter,
    builder,
    command,
    decorator,
    facade,
    factory,
    observer,
    singleton,
    strategy,
)

if TYPE_CHECKING:
    from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry


# Declaration order is the registration (and therefore listing/running) order
DEFAULT_DEMOS: Tuple[PatternDemo, ...] = (
    observer.DEMO,
    strategy.DEMO,
    command.DEMO,
    decorator.DEMO,
    facade.DEMO,
    adapter.DEMO,
    factory.DEMO,
    builder.DEMO,
    singleton.DEMO,
)


def register_all_patterns(registry: "PatternRegistry") -> None:
    """
    Register every default demo with ``registry``.

    Raises:
        DuplicateKeyError: If any demo name is already registered
    """
    for demo in DEFAULT_DEMOS:
        registry.register(demo.name, demo)
