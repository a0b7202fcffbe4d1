"""In-memory text sink that demo participants write to."""
from typing import Iterator, List, Tuple


class DemoOutput:
    """Ordered collection of output lines emitted while a demo runs."""

    def __init__(self) -> None:
        self._lines: List[str] = []

    def emit(self, line: str) -> None:
        """Append one line."""
        self._lines.append(str(line))

    @property
    def lines(self) -> Tuple[str, ...]:
        """Lines emitted so far, in emission order."""
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._lines))
