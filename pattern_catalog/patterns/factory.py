"""Factory pattern - creating animals from a string key."""
from abc import ABC, abstractmethod
from typing import Dict, List, Type

from pattern_catalog.domain.base.exceptions import InvalidArgumentError
from pattern_catalog.domain.demo import PatternCategory, PatternDemo


class Animal(ABC):
    """Product interface."""

    @abstractmethod
    def speak(self) -> str:
        """The animal's sound."""

    def __str__(self) -> str:
        return self.__class__.__name__


class Dog(Animal):
    def speak(self) -> str:
        return "Woof!"


class Cat(Animal):
    def speak(self) -> str:
        return "Meow!"


class Duck(Animal):
    def speak(self) -> str:
        return "Quack!"


class AnimalFactory:
    """Maps each key to exactly one concrete product type."""

    _products: Dict[str, Type[Animal]] = {
        "dog": Dog,
        "cat": Cat,
        "duck": Duck,
    }

    @classmethod
    def kinds(cls) -> List[str]:
        return list(cls._products)

    @classmethod
    def create(cls, kind: str) -> Animal:
        """
        Create the animal registered under ``kind``.

        Raises:
            InvalidArgumentError: If ``kind`` is not a known animal type
        """
        try:
            product_type = cls._products[kind]
        except KeyError:
            raise InvalidArgumentError("animal type", kind, allowed=cls._products) from None
        return product_type()


def create(kind: str) -> Animal:
    """Module-level shortcut for :meth:`AnimalFactory.create`."""
    return AnimalFactory.create(kind)


def run() -> List[str]:
    lines = []
    for kind in ("dog", "cat", "duck"):
        animal = create(kind)
        lines.append(f"{animal} says {animal.speak()}")

    try:
        create("fish")
    except InvalidArgumentError as e:
        lines.append(f"Cannot create 'fish': {e}")
    return lines


DEMO = PatternDemo(
    name="factory",
    category=PatternCategory.CREATIONAL,
    description=(
        "A factory maps a discrete key to exactly one concrete product type, "
        "so clients depend only on the product interface. Unknown keys are "
        "rejected with an error instead of returning a default."
    ),
    run=run,
)
