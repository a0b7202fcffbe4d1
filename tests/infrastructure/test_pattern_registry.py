"""Tests for the pattern registry."""

import threading

import pytest

from pattern_catalog.domain.base.exceptions import (
    ConfigurationError,
    DuplicateKeyError,
    NotFoundError,
    ValidationError,
)
from pattern_catalog.domain.demo import PatternCategory, PatternDemo
from pattern_catalog.infrastructure.registry.pattern_registry import (
    PatternRegistry,
    get_pattern_registry,
    reset_pattern_registry,
)


def make_demo(name, lines=("line",)):
    return PatternDemo(
        name=name,
        description=f"{name} demo",
        category=PatternCategory.BEHAVIORAL,
        run=lambda: list(lines),
    )


class TestPatternRegistry:
    """Test registration, lookup and listing."""

    def test_register_and_get(self, empty_registry):
        """Test a registered demo can be looked up by name."""
        demo = make_demo("observer")
        empty_registry.register("observer", demo)

        assert empty_registry.get("observer") is demo
        assert empty_registry.is_registered("observer")
        assert "observer" in empty_registry
        assert len(empty_registry) == 1

    def test_get_returns_demo_named_after_key(self, registry, pattern_names):
        """Test every default demo's name equals its lookup key."""
        for name in pattern_names:
            assert registry.get(name).name == name

    def test_duplicate_registration_rejected(self, empty_registry):
        """Test registering an existing name fails and keeps the original entry."""
        original = make_demo("strategy", lines=("original",))
        replacement = make_demo("strategy", lines=("replacement",))
        empty_registry.register("strategy", original)

        with pytest.raises(DuplicateKeyError) as exc_info:
            empty_registry.register("strategy", replacement)

        assert exc_info.value.key == "strategy"
        assert isinstance(exc_info.value, ConfigurationError)
        assert empty_registry.get("strategy") is original
        assert len(empty_registry) == 1

    def test_get_unknown_name(self, empty_registry):
        """Test looking up an unregistered name raises NotFoundError."""
        with pytest.raises(NotFoundError, match="Pattern 'visitor' not found"):
            empty_registry.get("visitor")

    def test_register_empty_name_rejected(self, empty_registry):
        """Test blank registration names are rejected."""
        with pytest.raises(ValidationError):
            empty_registry.register("  ", make_demo("observer"))
        assert len(empty_registry) == 0

    def test_register_name_must_match_demo(self, empty_registry):
        """Test the registration key must equal the demo's own name."""
        with pytest.raises(ValidationError, match="does not match"):
            empty_registry.register("observer", make_demo("strategy"))

    def test_list_preserves_insertion_order(self, registry, pattern_names):
        """Test names are listed in declaration order."""
        assert list(registry.list()) == pattern_names

    def test_list_is_restartable(self, registry):
        """Test iterating the listing twice yields the same order."""
        names = registry.list()
        assert list(names) == list(names)
        assert len(names) == 9

    def test_list_is_lazy_view(self, empty_registry):
        """Test the listing reflects registrations made after it was obtained."""
        names = empty_registry.list()
        empty_registry.register("observer", make_demo("observer"))
        assert list(names) == ["observer"]

    def test_demos_in_registration_order(self, registry, pattern_names):
        assert [demo.name for demo in registry.demos()] == pattern_names

    def test_clear_registrations(self, registry):
        registry.clear_registrations()
        assert len(registry) == 0
        assert list(registry.list()) == []

    def test_concurrent_registration_of_same_name(self, empty_registry):
        """Test only one of many concurrent registrations of one name succeeds."""
        barrier = threading.Barrier(20)
        outcomes = []

        def register():
            barrier.wait()
            try:
                empty_registry.register("observer", make_demo("observer"))
                outcomes.append("ok")
            except DuplicateKeyError:
                outcomes.append("duplicate")

        threads = [threading.Thread(target=register) for _ in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert outcomes.count("ok") == 1
        assert outcomes.count("duplicate") == 19


class TestGlobalPatternRegistry:
    """Test the process-wide registry holder."""

    def test_populated_with_defaults(self, pattern_names):
        assert list(get_pattern_registry().list()) == pattern_names

    def test_same_instance_on_every_access(self):
        assert get_pattern_registry() is get_pattern_registry()

    def test_reset_builds_new_registry(self):
        first = get_pattern_registry()
        reset_pattern_registry()
        second = get_pattern_registry()

        assert first is not second
        assert list(first.list()) == list(second.list())
