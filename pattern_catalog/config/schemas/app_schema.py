"""Main application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from .logging_schema import LoggingConfig
from .runner_schema import OutputConfig, RunnerConfig


class AppConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(extra="forbid")

    version: str = Field("1.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    runner: RunnerConfig = Field(default_factory=lambda: RunnerConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a plain dictionary."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
