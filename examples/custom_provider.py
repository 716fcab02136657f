#!/usr/bin/env python3
"""
Custom Provider Example - Multicast Demo

Shows the pieces of the demo used directly:
- Composing callbacks with compose() and ``+``
- Feeding each callback its own argument from a custom provider
- Running the stock demo with a fixed seed

Run: python examples/custom_provider.py
"""

import itertools
import random

from multicast_demo.composer import compose, for_each_independently
from multicast_demo.demo import run_demo
from multicast_demo.formatting import to_lowercase, to_uppercase, with_spaces
from multicast_demo.logging.config import configure_logging


def shout(text: str) -> None:
    print(f"{text.upper()}!")


def main() -> None:
    configure_logging(level="INFO")

    # Round-robin instead of random: every callback still gets its own value
    words = itertools.cycle(["first", "second", "third", "fourth"])
    sequence = compose([to_uppercase, to_lowercase]) + with_spaces + shout
    for_each_independently(sequence, lambda: next(words))

    run_demo(rng=random.Random(2021))


if __name__ == "__main__":
    main()
