"""Observer pattern - a weather station notifying its displays."""
from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_catalog.domain.base.output import DemoOutput
from pattern_catalog.domain.demo import PatternCategory, PatternDemo


class Observer(ABC):
    """Receives state change notifications from a subject."""

    @abstractmethod
    def update(self, temperature: float) -> None:
        """Handle a new temperature reading."""


class WeatherStation:
    """Subject that notifies observers whenever the temperature changes."""

    def __init__(self) -> None:
        self._observers: List[Observer] = []
        self._temperature: Optional[float] = None

    @property
    def temperature(self) -> Optional[float]:
        return self._temperature

    def attach(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def set_temperature(self, temperature: float) -> None:
        self._temperature = temperature
        self.notify()

    def notify(self) -> None:
        # Iterate over a snapshot: observers detached while a round is in
        # progress are still notified in that round, never afterwards.
        for observer in tuple(self._observers):
            observer.update(self._temperature)


class TemperatureDisplay(Observer):
    """Display that prints every reading it receives."""

    def __init__(self, name: str, output: DemoOutput):
        self.name = name
        self._output = output

    def update(self, temperature: float) -> None:
        self._output.emit(f"{self.name}: temperature is now {temperature}")


def run() -> List[str]:
    output = DemoOutput()
    station = WeatherStation()
    phone = TemperatureDisplay("Phone display", output)
    window = TemperatureDisplay("Window display", output)

    station.attach(phone)
    station.attach(window)
    station.set_temperature(25.0)

    station.detach(window)
    station.set_temperature(30.0)

    return list(output.lines)


DEMO = PatternDemo(
    name="observer",
    category=PatternCategory.BEHAVIORAL,
    description=(
        "A subject keeps a list of observers and notifies each of them, "
        "synchronously and in registration order, whenever its state changes. "
        "Detached observers receive no further notifications."
    ),
    run=run,
)
