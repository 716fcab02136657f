"""Unit tests for callback composition and independent invocation."""

from unittest.mock import Mock

import pytest

from multicast_demo.composer import CallbackSequence, compose, for_each_independently
from multicast_demo.errors import CompositionError
from multicast_demo.formatting import to_lowercase, to_uppercase, with_spaces


class TestCompose:
    """Test suite for compose()."""

    def test_preserves_order(self) -> None:
        """Composed sequence iterates in the order given."""
        sequence = compose([to_uppercase, to_lowercase, with_spaces])

        assert list(sequence) == [to_uppercase, to_lowercase, with_spaces]
        assert list(sequence) != [to_lowercase, to_uppercase, with_spaces]

    def test_keeps_duplicates(self) -> None:
        """No deduplication takes place."""
        sequence = compose([to_uppercase, to_uppercase])
        assert len(sequence) == 2

    def test_empty_input_is_valid(self) -> None:
        """An empty list composes into an empty sequence."""
        sequence = compose([])
        assert len(sequence) == 0
        assert sequence.invocation_list() == ()

    def test_accepts_any_iterable(self) -> None:
        """Generators are consumed once and frozen into the sequence."""
        sequence = compose(cb for cb in (to_lowercase, with_spaces))
        assert sequence.invocation_list() == (to_lowercase, with_spaces)

    def test_rejects_non_callable(self) -> None:
        """A non-callable element raises CompositionError with its position."""
        with pytest.raises(CompositionError) as exc_info:
            compose([to_uppercase, "not a callback"])

        assert exc_info.value.position == 1
        assert exc_info.value.callback == "not a callback"
        assert exc_info.value.context == {"type": "str"}


class TestCallbackSequence:
    """Test suite for CallbackSequence."""

    def test_add_single_callback(self) -> None:
        """Adding a callback appends it and leaves the original untouched."""
        first = compose([to_uppercase])
        combined = first + to_lowercase

        assert combined.invocation_list() == (to_uppercase, to_lowercase)
        assert first.invocation_list() == (to_uppercase,)

    def test_add_sequences(self) -> None:
        """Chained addition mirrors composition order."""
        combined = CallbackSequence() + to_uppercase + compose([to_lowercase, with_spaces])
        assert combined == compose([to_uppercase, to_lowercase, with_spaces])

    def test_add_non_callable_is_unsupported(self) -> None:
        """Adding a plain value is a TypeError."""
        with pytest.raises(TypeError):
            compose([to_uppercase]) + 42

    def test_is_immutable(self) -> None:
        """Sequences are frozen."""
        sequence = compose([to_uppercase])
        with pytest.raises(AttributeError):
            sequence.callbacks = ()


class TestForEachIndependently:
    """Test suite for for_each_independently()."""

    def test_provider_called_once_per_callback(self, make_recorder) -> None:
        """Three callbacks mean exactly three provider calls."""
        provider = Mock(side_effect=["one", "two", "three"])
        sequence = compose([make_recorder("a"), make_recorder("b"), make_recorder("c")])

        for_each_independently(sequence, provider)

        assert provider.call_count == 3

    def test_each_callback_gets_its_own_argument(self, make_recorder, call_log) -> None:
        """Arguments are not shared between callbacks."""
        provider = Mock(side_effect=["one", "two", "three"])
        sequence = compose([make_recorder("a"), make_recorder("b"), make_recorder("c")])

        for_each_independently(sequence, provider)

        assert call_log == [("a", "one"), ("b", "two"), ("c", "three")]

    def test_provider_interleaves_with_callbacks(self) -> None:
        """The provider runs right before each callback, not all up front."""
        events = []
        counter = iter(range(10))

        def provider() -> str:
            value = f"arg{next(counter)}"
            events.append(("provide", value))
            return value

        def callback(text: str) -> None:
            events.append(("call", text))

        for_each_independently(compose([callback, callback]), provider)

        assert events == [
            ("provide", "arg0"),
            ("call", "arg0"),
            ("provide", "arg1"),
            ("call", "arg1"),
        ]

    def test_empty_sequence_never_calls_provider(self, capsys) -> None:
        """Empty composition invokes nothing and prints nothing."""
        provider = Mock(return_value="unused")

        for_each_independently(compose([]), provider)

        provider.assert_not_called()
        assert capsys.readouterr().out == ""

    def test_callback_failure_halts_remaining(self, make_recorder, call_log) -> None:
        """An exception propagates unchanged and later callbacks are skipped."""
        def explode(text: str) -> None:
            raise ValueError(f"bad input: {text}")

        provider = Mock(side_effect=["one", "two", "three"])
        sequence = compose([make_recorder("a"), explode, make_recorder("c")])

        with pytest.raises(ValueError, match="bad input: two"):
            for_each_independently(sequence, provider)

        assert call_log == [("a", "one")]
        assert provider.call_count == 2

    def test_provider_failure_propagates(self, make_recorder, call_log) -> None:
        """A failing provider stops the run before the callback is invoked."""
        provider = Mock(side_effect=["one", LookupError("exhausted")])
        sequence = compose([make_recorder("a"), make_recorder("b")])

        with pytest.raises(LookupError):
            for_each_independently(sequence, provider)

        assert call_log == [("a", "one")]
