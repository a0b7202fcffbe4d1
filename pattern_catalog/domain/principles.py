"""SOLID principles reference catalog."""
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict

from pattern_catalog.domain.base.exceptions import NotFoundError


class Principle(BaseModel):
    """One SOLID principle."""
    model_config = ConfigDict(frozen=True)

    letter: str
    name: str
    summary: str
    related_patterns: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "letter": self.letter,
            "name": self.name,
            "summary": self.summary,
            "related_patterns": list(self.related_patterns),
        }


_PRINCIPLES: Tuple[Principle, ...] = (
    Principle(
        letter="S",
        name="Single Responsibility Principle",
        summary="A class should have one, and only one, reason to change.",
        related_patterns=("facade", "command"),
    ),
    Principle(
        letter="O",
        name="Open/Closed Principle",
        summary="Software entities should be open for extension but closed for modification.",
        related_patterns=("strategy", "decorator", "observer"),
    ),
    Principle(
        letter="L",
        name="Liskov Substitution Principle",
        summary="Subtypes must be usable wherever their base type is expected without altering correctness.",
        related_patterns=("factory", "strategy"),
    ),
    Principle(
        letter="I",
        name="Interface Segregation Principle",
        summary="Clients should not be forced to depend on methods they do not use.",
        related_patterns=("adapter",),
    ),
    Principle(
        letter="D",
        name="Dependency Inversion Principle",
        summary="Depend on abstractions, not on concrete implementations.",
        related_patterns=("factory", "adapter", "builder"),
    ),
)


def list_principles() -> List[Principle]:
    """Return the principles in S, O, L, I, D order."""
    return list(_PRINCIPLES)


def get_principle(key: str) -> Principle:
    """Look up a principle by letter or full name, ignoring case."""
    wanted = key.strip().lower()
    for principle in _PRINCIPLES:
        if wanted in (principle.letter.lower(), principle.name.lower()):
            return principle
    raise NotFoundError("Principle", key)
