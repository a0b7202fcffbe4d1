"""Demo runner - executes registered demos and aggregates their output."""
from typing import Iterable, List, Optional

from pattern_catalog.config.schemas import RunnerConfig
from pattern_catalog.domain.base.exceptions import DemoExecutionError, DomainException
from pattern_catalog.domain.demo import DemoResult, PatternDemo
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry


class DemoRunner:
    """
    Runs demos from a registry in registration order.

    Demos are pure and deterministic, so nothing is retried. Domain errors
    raised by a demo propagate unchanged; any other exception is wrapped in
    DemoExecutionError.
    """

    def __init__(self, registry: PatternRegistry, config: Optional[RunnerConfig] = None):
        self._registry = registry
        self._config = config or RunnerConfig()
        self._logger = get_logger(__name__)

    @property
    def registry(self) -> PatternRegistry:
        return self._registry

    def run_one(self, name: str) -> DemoResult:
        """
        Run a single demo.

        Raises:
            NotFoundError: If ``name`` is not registered
        """
        return self._execute(self._registry.get(name))

    def run_all(self) -> List[DemoResult]:
        """Run every registered demo in registration order."""
        return [self._execute(demo) for demo in self._registry.demos()]

    def run_many(self, names: Iterable[str]) -> List[DemoResult]:
        """
        Run the requested demos in registration order.

        Every name is resolved before anything runs, so an unknown name
        fails the whole request without partial output.

        Raises:
            NotFoundError: If any requested name is not registered
        """
        requested = {self._registry.get(name).name for name in names}
        return [
            self._execute(demo) for demo in self._registry.demos() if demo.name in requested
        ]

    @staticmethod
    def concatenate(results: Iterable[DemoResult]) -> List[str]:
        """Flatten results into one ordered sequence of lines."""
        lines: List[str] = []
        for result in results:
            lines.extend(result.lines)
        return lines

    def render(self, results: Iterable[DemoResult]) -> List[str]:
        """Lines for display: each demo's header followed by its output."""
        lines: List[str] = []
        for index, result in enumerate(results):
            if index and self._config.blank_line_between:
                lines.append("")
            lines.append(self._config.header_template.format(name=result.name))
            lines.extend(result.lines)
        return lines

    def _execute(self, demo: PatternDemo) -> DemoResult:
        self._logger.debug(f"Running demo: {demo.name}")
        try:
            lines = demo.run()
        except DomainException:
            raise
        except Exception as e:
            self._logger.error(f"Demo {demo.name} failed: {e}")
            raise DemoExecutionError(demo.name, str(e)) from e

        result = DemoResult(name=demo.name, lines=tuple(lines))
        self._logger.info(f"Demo {demo.name} produced {len(result.lines)} lines")
        return result
