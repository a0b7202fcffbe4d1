"""Command pattern - undoable writes against a text document."""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from pattern_catalog.domain.base.output import DemoOutput
from pattern_catalog.domain.demo import PatternCategory, PatternDemo


class TextDocument:
    """Receiver: performs the actual edits."""

    def __init__(self, content: str = ""):
        self.content = content

    def append(self, text: str) -> None:
        self.content += text

    def truncate(self, length: int) -> None:
        """Remove ``length`` characters from the end."""
        if length:
            self.content = self.content[:-length]


class Command(ABC):

    @abstractmethod
    def execute(self) -> None:
        """Perform the effect on the receiver."""

    @abstractmethod
    def undo(self) -> None:
        """Reverse the effect of :meth:`execute`."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short label for history listings."""


class WriteCommand(Command):
    """Appends text to a document; undo removes it again."""

    def __init__(self, document: TextDocument, text: str):
        self._document = document
        self._text = text

    @property
    def name(self) -> str:
        return f"write {self._text!r}"

    def execute(self) -> None:
        self._document.append(self._text)

    def undo(self) -> None:
        self._document.truncate(len(self._text))


class CommandHistory:
    """Invoker: executes commands and keeps a LIFO history for undo."""

    def __init__(self) -> None:
        self._history: List[Command] = []

    @property
    def history(self) -> Tuple[str, ...]:
        return tuple(command.name for command in self._history)

    def execute(self, command: Command) -> None:
        command.execute()
        self._history.append(command)

    def undo(self) -> Optional[Command]:
        """Undo the most recent command; returns None when there is nothing to undo."""
        if not self._history:
            return None
        command = self._history.pop()
        command.undo()
        return command


def run() -> List[str]:
    output = DemoOutput()
    document = TextDocument()
    invoker = CommandHistory()

    for text in ("Hello", " World"):
        command = WriteCommand(document, text)
        invoker.execute(command)
        output.emit(f"Executed {command.name}: content is {document.content!r}")

    for _ in range(3):
        command = invoker.undo()
        if command is None:
            output.emit(f"Nothing to undo: content is {document.content!r}")
        else:
            output.emit(f"Undid {command.name}: content is {document.content!r}")

    return list(output.lines)


DEMO = PatternDemo(
    name="command",
    category=PatternCategory.BEHAVIORAL,
    description=(
        "Requests are wrapped in command objects. An invoker executes them "
        "against a receiver and records them on a history stack so the most "
        "recent one can be undone. Undo on an empty history does nothing."
    ),
    run=run,
)
