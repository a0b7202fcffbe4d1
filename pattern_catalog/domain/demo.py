"""Pattern demo descriptors and execution results."""
from enum import Enum
from typing import Callable, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PatternCategory(str, Enum):
    """Classic classification of object-oriented design patterns."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class PatternDemo(BaseModel):
    """
    Self-contained demonstration of one design pattern.

    A demo bundles a human-readable description with a zero-argument ``run``
    procedure that exercises the pattern's sample classes and returns the
    lines a reader would see, in order. Demos are immutable once created.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Unique registry key")
    description: str = Field("", description="What the demo shows")
    category: PatternCategory
    run: Callable[[], Sequence[str]] = Field(..., description="Produces the demo output lines")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject blank names."""
        if not v or not v.strip():
            raise ValueError("Pattern name must not be empty")
        return v

    def summary(self) -> dict:
        """Serializable view without the run procedure."""
        return {
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
        }


class DemoResult(BaseModel):
    """Output of one demo run."""
    model_config = ConfigDict(frozen=True)

    name: str
    lines: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"name": self.name, "lines": list(self.lines)}
