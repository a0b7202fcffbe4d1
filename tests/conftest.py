"""Shared fixtures for the pattern catalog test suite."""

import logging

import pytest

from pattern_catalog.application.demo_runner import DemoRunner
from pattern_catalog.infrastructure.registry.pattern_registry import (
    PatternRegistry,
    reset_pattern_registry,
)
from pattern_catalog.patterns.registration import register_all_patterns

PATTERN_NAMES = [
    "observer",
    "strategy",
    "command",
    "decorator",
    "facade",
    "adapter",
    "factory",
    "builder",
    "singleton",
]


@pytest.fixture(autouse=True)
def clean_global_registry():
    """Every test starts and ends without a process-wide registry."""
    reset_pattern_registry()
    yield
    reset_pattern_registry()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep developer environment overrides out of the tests."""
    for var in (
        "PATTERN_CATALOG_CONFIG",
        "PATTERN_CATALOG_LOG_LEVEL",
        "PATTERN_CATALOG_LOG_DESTINATION",
        "PATTERN_CATALOG_OUTPUT_FORMAT",
        "PATTERN_CATALOG_HEADER_TEMPLATE",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def empty_registry():
    return PatternRegistry()


@pytest.fixture
def registry():
    """Fresh registry holding the nine default demos."""
    registry = PatternRegistry()
    register_all_patterns(registry)
    return registry


@pytest.fixture
def runner(registry):
    return DemoRunner(registry)


@pytest.fixture
def pattern_names():
    """Default pattern names in declaration order."""
    return list(PATTERN_NAMES)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging during a test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)
