"""Decorator pattern - stacking notification channels around a base notifier."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.base.output import DemoOutput
from pattern_catalog.domain.demo import PatternCategory, PatternDemo


class Notifier(ABC):
    """Component interface shared by the base notifier and every decorator."""

    @abstractmethod
    def send(self, message: str) -> None:
        """Deliver ``message``."""


class BaseNotifier(Notifier):

    def __init__(self, output: DemoOutput):
        self._output = output

    def send(self, message: str) -> None:
        self._output.emit(f"Notification: {message}")


class NotifierDecorator(Notifier):
    """Wraps exactly one notifier: forwards first, then adds its own effect."""

    def __init__(self, wrapped: Notifier, output: DemoOutput):
        self._wrapped = wrapped
        self._output = output

    @property
    def wrapped(self) -> Notifier:
        return self._wrapped

    def send(self, message: str) -> None:
        self._wrapped.send(message)
        self._output.emit(self.describe(message))

    @abstractmethod
    def describe(self, message: str) -> str:
        """Line describing this decorator's added effect."""


class EmailDecorator(NotifierDecorator):

    def describe(self, message: str) -> str:
        return f"Email sent: {message}"


class SMSDecorator(NotifierDecorator):

    def describe(self, message: str) -> str:
        return f"SMS sent: {message}"


def run() -> List[str]:
    output = DemoOutput()
    notifier = SMSDecorator(EmailDecorator(BaseNotifier(output), output), output)
    notifier.send("Server is down")
    return list(output.lines)


DEMO = PatternDemo(
    name="decorator",
    category=PatternCategory.STRUCTURAL,
    description=(
        "Decorators wrap a component behind the same interface, forward each "
        "call to the wrapped component and then add their own effect. The "
        "stacking order decides the order in which effects are observed."
    ),
    run=run,
)
