"""
Errors raised while building or feeding a callback sequence.
"""

from typing import Any, Optional

from .base import MulticastDemoError


class CompositionError(MulticastDemoError):
    """A non-callable value was offered for composition."""

    def __init__(self, message: str, callback: Any = None,
                 position: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.callback = callback
        self.position = position


class EmptySampleError(MulticastDemoError):
    """Random selection was requested from an empty sample list."""
    pass
