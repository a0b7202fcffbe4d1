"""Tests for the Observer demo."""

from pattern_catalog.domain.base.output import DemoOutput
from pattern_catalog.patterns import observer
from pattern_catalog.patterns.observer import Observer, TemperatureDisplay, WeatherStation


class DetachingObserver(Observer):
    """Detaches another observer while being notified."""

    def __init__(self, station, victim, output):
        self.station = station
        self.victim = victim
        self.output = output

    def update(self, temperature):
        self.output.emit(f"detacher saw {temperature}")
        self.station.detach(self.victim)


class TestWeatherStation:
    """Test notification fan-out and detachment."""

    def test_two_observers_notified_in_registration_order(self):
        output = DemoOutput()
        station = WeatherStation()
        station.attach(TemperatureDisplay("first", output))
        station.attach(TemperatureDisplay("second", output))

        station.set_temperature(25.0)

        assert output.lines == (
            "first: temperature is now 25.0",
            "second: temperature is now 25.0",
        )

    def test_detached_observer_not_notified(self):
        output = DemoOutput()
        station = WeatherStation()
        first = TemperatureDisplay("first", output)
        second = TemperatureDisplay("second", output)
        station.attach(first)
        station.attach(second)
        station.set_temperature(25.0)

        station.detach(second)
        station.set_temperature(30.0)

        assert output.lines[2:] == ("first: temperature is now 30.0",)

    def test_attach_is_idempotent(self):
        output = DemoOutput()
        station = WeatherStation()
        display = TemperatureDisplay("only", output)
        station.attach(display)
        station.attach(display)

        station.set_temperature(20.0)

        assert len(output) == 1

    def test_detach_unknown_observer_is_ignored(self):
        station = WeatherStation()
        station.detach(TemperatureDisplay("stranger", DemoOutput()))

    def test_removal_during_notification_applies_to_next_round(self):
        """Test an observer removed mid-round is still notified in that round only."""
        output = DemoOutput()
        station = WeatherStation()
        victim = TemperatureDisplay("victim", output)
        station.attach(DetachingObserver(station, victim, output))
        station.attach(victim)

        station.set_temperature(10.0)
        station.set_temperature(11.0)

        assert output.lines == (
            "detacher saw 10.0",
            "victim: temperature is now 10.0",
            "detacher saw 11.0",
        )

    def test_state_is_kept(self):
        station = WeatherStation()
        station.set_temperature(12.5)
        assert station.temperature == 12.5


class TestObserverDemo:

    def test_run_output(self):
        assert observer.run() == [
            "Phone display: temperature is now 25.0",
            "Window display: temperature is now 25.0",
            "Phone display: temperature is now 30.0",
        ]

    def test_run_is_deterministic(self):
        assert observer.run() == observer.run()
