from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..config_loader import ConfigLoader
from .constants import (
    DEFAULT_DRIVER_ARGS,
    DEFAULT_DRIVER_EXECUTABLE,
    DEFAULT_DRIVER_HOST,
    DEFAULT_DRIVER_PORT,
    DEFAULT_SETTLE_DELAY_SECONDS,
)


class ProcessEntry(BaseModel):
    pid: int = Field(..., gt=0)
    command: str = ""


class SupervisorSettings(BaseModel):
    host: str = Field(DEFAULT_DRIVER_HOST, description="Host the driver listens on; probed for liveness.")
    port: int = Field(DEFAULT_DRIVER_PORT, gt=0, lt=65536, description="Port the driver listens on.")
    executable: str = Field(DEFAULT_DRIVER_EXECUTABLE, description="Binary name resolved on PATH when starting.")
    args: List[str] = Field(default_factory=lambda: list(DEFAULT_DRIVER_ARGS), description="Arguments passed to the driver binary.")
    process_name: str = Field(DEFAULT_DRIVER_EXECUTABLE, description="Substring identifying the driver in the process table.")
    settle_delay_seconds: float = Field(DEFAULT_SETTLE_DELAY_SECONDS, ge=0, description="Wait after launch before start() returns.")

    @classmethod
    def from_config(cls, config_loader: Optional[ConfigLoader] = None) -> "SupervisorSettings":
        """Build settings from the 'chromedriver' block; missing keys keep their defaults."""
        loader = config_loader if config_loader else ConfigLoader()
        overrides: Dict[str, Any] = {}
        for name in cls.model_fields:
            value = loader.get_driver_setting(name)
            if value is not None:
                overrides[name] = value
        return cls(**overrides)
