"""Builder pattern - assembling an immutable house step by step."""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalog.domain.demo import PatternCategory, PatternDemo


class House(BaseModel):
    """Immutable product; only HouseBuilder.build() is meant to create it."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    bedrooms: int = Field(0, ge=0)
    bathrooms: int = Field(0, ge=0)
    has_garage: bool = False
    has_garden: bool = False
    has_pool: bool = False

    def describe(self) -> str:
        extras = [
            label
            for label, present in (
                ("garage", self.has_garage),
                ("garden", self.has_garden),
                ("pool", self.has_pool),
            )
            if present
        ]
        features = ", ".join(extras) if extras else "no extras"
        return f"House with {self.bedrooms} bedrooms, {self.bathrooms} bathrooms ({features})"


class HouseBuilder:
    """Mutable builder; every setter returns the builder itself for chaining."""

    def __init__(self) -> None:
        self._parts: Dict[str, Any] = {}

    def set_bedrooms(self, count: int) -> "HouseBuilder":
        self._parts["bedrooms"] = count
        return self

    def set_bathrooms(self, count: int) -> "HouseBuilder":
        self._parts["bathrooms"] = count
        return self

    def add_garage(self) -> "HouseBuilder":
        self._parts["has_garage"] = True
        return self

    def add_garden(self) -> "HouseBuilder":
        self._parts["has_garden"] = True
        return self

    def add_pool(self) -> "HouseBuilder":
        self._parts["has_pool"] = True
        return self

    def build(self) -> House:
        """Return an immutable snapshot of the current parts."""
        return House(**self._parts)


def run() -> List[str]:
    builder = HouseBuilder()
    family_home = builder.set_bedrooms(3).set_bathrooms(2).add_garage().build()

    # Later changes to the builder never reach an already-built house
    builder.add_pool()
    holiday_home = builder.build()

    twin = HouseBuilder().set_bedrooms(3).set_bathrooms(2).add_garage().build()
    return [
        family_home.describe(),
        holiday_home.describe(),
        f"Family home unchanged after builder reuse: {not family_home.has_pool}",
        f"Equivalent instructions build equal houses: {family_home == twin}",
        f"Equivalent instructions build the same object: {family_home is twin}",
    ]


DEMO = PatternDemo(
    name="builder",
    category=PatternCategory.CREATIONAL,
    description=(
        "A builder collects construction steps through chained setters and "
        "produces an immutable product in a final build() step. Building "
        "twice from equivalent instructions gives equal but distinct products."
    ),
    run=run,
)
