"""Default configuration parameters for the multicast demo."""

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_SAMPLES: tuple[str, ...] = (
    "Hello world",
    "Good day",
    "Today is Thursday",
    "Code Code Code",
    "aBcDeFg",
)


@dataclass(frozen=True)
class MessageParams:
    """Sample messages fed to the callbacks."""
    samples: tuple[str, ...] = DEFAULT_SAMPLES
    seed: Optional[int] = None                       # None seeds from the OS


@dataclass(frozen=True)
class LoggingParams:
    """structlog settings; output always goes to stderr."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = False


@dataclass(frozen=True)
class DemoConfig:
    """Complete default configuration."""
    messages: MessageParams = field(default_factory=MessageParams)
    logging: LoggingParams = field(default_factory=LoggingParams)


def get_default_config() -> DemoConfig:
    """Get the default configuration instance."""
    return DemoConfig(
        messages=MessageParams(),
        logging=LoggingParams(),
    )
