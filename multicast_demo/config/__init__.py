"""Configuration defaults, loading and validation."""

from .defaults import DemoConfig, LoggingParams, MessageParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "DemoConfig",
    "LoggingParams",
    "MessageParams",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
