"""Base exception for the multicast demo."""

from typing import Any, Dict, Optional


class MulticastDemoError(Exception):
    """Base class for errors raised by the demo itself."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
