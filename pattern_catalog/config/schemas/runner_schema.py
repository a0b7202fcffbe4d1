"""Demo runner and output configuration schemas."""
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class OutputFormat(str, Enum):
    """Supported CLI output formats."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"


class RunnerConfig(BaseModel):
    """How the runner renders multi-demo output."""

    header_template: str = Field("== {name} ==", description="Header printed before each demo")
    blank_line_between: bool = Field(True, description="Separate demos with an empty line")

    @field_validator("header_template")
    @classmethod
    def validate_header_template(cls, v: str) -> str:
        """Header must reference the demo name and use no other placeholders."""
        if "{name}" not in v:
            raise ValueError("header_template must contain '{name}'")
        try:
            v.format(name="observer")
        except (AttributeError, IndexError, KeyError, ValueError) as e:
            raise ValueError(f"header_template is not a valid format string: {e!r}") from e
        return v


class OutputConfig(BaseModel):
    """Output configuration."""

    format: OutputFormat = Field(OutputFormat.TEXT, description="Default output format")

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v
