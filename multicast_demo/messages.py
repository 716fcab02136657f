"""
Sample messages and the random argument provider.

The random source is owned by the caller and passed in; the module-level
instance is only a fallback for ad-hoc calls without one.
"""

import random
from typing import Callable, Optional, Sequence

from .config.defaults import DEFAULT_SAMPLES
from .errors import EmptySampleError

ArgumentProvider = Callable[[], str]

SAMPLE_MESSAGES: tuple[str, ...] = DEFAULT_SAMPLES

_fallback_rng = random.Random()


def pick_random_message(samples: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """
    Pick one sample uniformly at random.

    Args:
        samples: Non-empty sequence of candidate messages
        rng: Random source, the process-wide fallback when omitted

    Returns:
        One element of ``samples``

    Raises:
        EmptySampleError: If ``samples`` is empty
    """
    if len(samples) == 0:
        raise EmptySampleError("Cannot pick a message from an empty sample list")

    source = rng if rng is not None else _fallback_rng
    return samples[source.randrange(len(samples))]


def message_provider(samples: Sequence[str], rng: random.Random) -> ArgumentProvider:
    """Build an argument provider drawing a fresh random sample on every call."""
    if len(samples) == 0:
        raise EmptySampleError("Cannot build a provider over an empty sample list")

    pool = tuple(samples)

    def provide() -> str:
        return pick_random_message(pool, rng)

    return provide
