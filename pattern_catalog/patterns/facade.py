"""Facade pattern - one call to start or stop a home theater."""
from typing import List

from pattern_catalog.domain.base.output import DemoOutput
from pattern_catalog.domain.demo import PatternCategory, PatternDemo


class Lights:

    def __init__(self, output: DemoOutput):
        self._output = output

    def dim(self, level: int) -> None:
        self._output.emit(f"Lights dimmed to {level}%")

    def on(self) -> None:
        self._output.emit("Lights on")


class Projector:

    def __init__(self, output: DemoOutput):
        self._output = output

    def on(self) -> None:
        self._output.emit("Projector on")

    def off(self) -> None:
        self._output.emit("Projector off")


class Amplifier:

    def __init__(self, output: DemoOutput):
        self._output = output

    def on(self) -> None:
        self._output.emit("Amplifier on")

    def set_volume(self, level: int) -> None:
        self._output.emit(f"Amplifier volume set to {level}")

    def off(self) -> None:
        self._output.emit("Amplifier off")


class StreamingPlayer:

    def __init__(self, output: DemoOutput):
        self._output = output

    def on(self) -> None:
        self._output.emit("Streaming player on")

    def play(self, title: str) -> None:
        self._output.emit(f"Playing '{title}'")

    def stop(self) -> None:
        self._output.emit("Playback stopped")

    def off(self) -> None:
        self._output.emit("Streaming player off")


class HomeTheaterFacade:
    """
    Single entry point over the theater subsystems.

    ``watch_movie`` and ``end_movie`` each follow their own fixed order;
    shutdown is not simply the reverse of startup (the lights come back on
    last, after every device is off).
    """

    def __init__(self, lights: Lights, projector: Projector, amplifier: Amplifier, player: StreamingPlayer):
        self.lights = lights
        self.projector = projector
        self.amplifier = amplifier
        self.player = player

    def watch_movie(self, title: str) -> None:
        self.lights.dim(10)
        self.projector.on()
        self.amplifier.on()
        self.amplifier.set_volume(5)
        self.player.on()
        self.player.play(title)

    def end_movie(self) -> None:
        self.player.stop()
        self.player.off()
        self.amplifier.off()
        self.projector.off()
        self.lights.on()


def run() -> List[str]:
    output = DemoOutput()
    theater = HomeTheaterFacade(
        Lights(output), Projector(output), Amplifier(output), StreamingPlayer(output)
    )

    output.emit("Get ready to watch a movie...")
    theater.watch_movie("Inception")
    output.emit("Shutting down the theater...")
    theater.end_movie()
    return list(output.lines)


DEMO = PatternDemo(
    name="facade",
    category=PatternCategory.STRUCTURAL,
    description=(
        "A facade offers one method that sequences calls across several "
        "subsystems in a fixed order, so the client issues a single call "
        "instead of many. Teardown has its own independent order."
    ),
    run=run,
)
