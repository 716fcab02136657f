"""
Callback composition and independent invocation.

A CallbackSequence is the composed "multicast" value: an ordered, immutable
collection of single-argument callbacks. Instead of calling every member
with one shared argument, the sequence is decomposed and each member is
invoked with its own argument drawn from a provider at call time.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Union

from .errors import CompositionError
from .logging.config import get_logger

Callback = Callable[[str], None]

logger = get_logger(__name__)


@dataclass(frozen=True)
class CallbackSequence:
    """Ordered, immutable collection of callbacks (insertion order = call order)."""

    callbacks: tuple[Callback, ...] = ()

    def __iter__(self) -> Iterator[Callback]:
        return iter(self.callbacks)

    def __len__(self) -> int:
        return len(self.callbacks)

    def __add__(self, other: Union["CallbackSequence", Callback]) -> "CallbackSequence":
        """Append another sequence or a single callback, returning a new sequence."""
        if isinstance(other, CallbackSequence):
            return CallbackSequence(self.callbacks + other.callbacks)
        if callable(other):
            return CallbackSequence(self.callbacks + (other,))
        return NotImplemented

    def invocation_list(self) -> tuple[Callback, ...]:
        """Return the constituent callbacks in composition order."""
        return self.callbacks


def compose(callbacks: Iterable[Callback]) -> CallbackSequence:
    """
    Combine callbacks into one sequence, preserving order.

    Duplicates are kept and an empty input yields an empty sequence.

    Raises:
        CompositionError: If an element is not callable
    """
    collected = tuple(callbacks)

    for position, callback in enumerate(collected):
        if not callable(callback):
            raise CompositionError(
                f"Element at position {position} is not callable",
                callback=callback,
                position=position,
                context={"type": type(callback).__name__},
            )

    logger.debug("Callbacks composed", count=len(collected))
    return CallbackSequence(collected)


def for_each_independently(
    sequence: CallbackSequence,
    argument_provider: Callable[[], str],
) -> None:
    """
    Invoke every callback in order, each with a freshly provided argument.

    The provider is called exactly once per callback, right before that
    callback runs. Any exception from the provider or a callback propagates
    unchanged and the remaining callbacks are skipped.

    Args:
        sequence: Composed callbacks
        argument_provider: Zero-argument function supplying each argument
    """
    for position, callback in enumerate(sequence):
        name = getattr(callback, "__name__", repr(callback))

        try:
            argument = argument_provider()
        except Exception as e:
            logger.error(
                "Argument provider failed",
                position=position,
                callback=name,
                error=str(e),
            )
            raise

        logger.debug(
            "Invoking callback",
            position=position,
            callback=name,
            argument=argument,
        )

        try:
            callback(argument)
        except Exception as e:
            logger.error(
                "Callback invocation failed",
                position=position,
                callback=name,
                error=str(e),
            )
            raise
