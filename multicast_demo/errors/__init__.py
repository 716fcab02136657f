"""
Error classification for the multicast demo.

Callback failures are never wrapped: they propagate to the caller unchanged.
These classes cover the demo's own preconditions (composition, sample
selection and configuration).
"""

from .base import MulticastDemoError
from .composition import CompositionError, EmptySampleError
from .configuration import ConfigurationError

__all__ = [
    "MulticastDemoError",
    "CompositionError",
    "EmptySampleError",
    "ConfigurationError",
]
