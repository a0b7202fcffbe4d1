"""Adapter pattern - a legacy line printer behind a modern document interface."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.base.output import DemoOutput
from pattern_catalog.domain.demo import PatternCategory, PatternDemo


class DocumentPrinter(ABC):
    """Target interface expected by clients."""

    @abstractmethod
    def print_document(self, title: str, body: str) -> None:
        """Print a titled document."""

    @abstractmethod
    def status(self) -> str:
        """Human-readable printer status."""


class LegacyLinePrinter:
    """Existing component with an incompatible, line-oriented API."""

    def __init__(self, output: DemoOutput):
        self._output = output
        self.lines_printed = 0

    def print_line(self, text: str) -> None:
        self.lines_printed += 1
        self._output.emit(f"[legacy] {text}")

    def feed_paper(self) -> None:
        self._output.emit("[legacy] --- paper fed ---")

    def get_counter(self) -> int:
        return self.lines_printed


class LinePrinterAdapter(DocumentPrinter):
    """Implements DocumentPrinter on top of one LegacyLinePrinter."""

    def __init__(self, legacy: LegacyLinePrinter):
        self._legacy = legacy

    @property
    def legacy(self) -> LegacyLinePrinter:
        return self._legacy

    def print_document(self, title: str, body: str) -> None:
        self._legacy.print_line(title.upper())
        for line in body.splitlines():
            self._legacy.print_line(line)
        self._legacy.feed_paper()

    def status(self) -> str:
        return f"Lines printed: {self._legacy.get_counter()}"


def run() -> List[str]:
    output = DemoOutput()
    printer: DocumentPrinter = LinePrinterAdapter(LegacyLinePrinter(output))
    printer.print_document("Quarterly report", "Revenue is up.\nCosts are down.")
    output.emit(printer.status())
    return list(output.lines)


DEMO = PatternDemo(
    name="adapter",
    category=PatternCategory.STRUCTURAL,
    description=(
        "An adapter implements the interface clients expect by translating "
        "each call into one or more calls on an existing component with an "
        "incompatible interface. It holds one reference to that component "
        "for its whole lifetime."
    ),
    run=run,
)
