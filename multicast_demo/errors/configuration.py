"""Configuration failures."""

from typing import Any, List, Optional

from .base import MulticastDemoError


class ConfigurationError(MulticastDemoError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
