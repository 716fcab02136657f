"""
Entry routine for the multicast demo.

Builds the composed formatting callbacks and invokes each of them with its
own randomly chosen sample message.
"""

import random
import sys
from typing import Callable, Iterable, Optional

from .composer import compose, for_each_independently
from .config.defaults import DemoConfig, get_default_config
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError
from .formatting import DEFAULT_CALLBACKS, FormatCallback
from .logging.config import configure_logging, get_logger
from .messages import message_provider

logger = get_logger(__name__)


def run_demo(
    config: Optional[DemoConfig] = None,
    rng: Optional[random.Random] = None,
    argument_provider: Optional[Callable[[], str]] = None,
    callbacks: Optional[Iterable[FormatCallback]] = None,
) -> None:
    """
    Run the demonstration once.

    Prints one blank line, then one line per composed callback.

    Args:
        config: Demo configuration, defaults when omitted
        rng: Random source for message selection, seeded from config when omitted
        argument_provider: Replaces random message selection entirely
        callbacks: Callbacks to compose, the three formatters when omitted
    """
    config = config or get_default_config()

    if argument_provider is None:
        if rng is None:
            rng = random.Random(config.messages.seed)
        argument_provider = message_provider(config.messages.samples, rng)

    sequence = compose(DEFAULT_CALLBACKS if callbacks is None else callbacks)

    print(file=sys.stdout, flush=True)

    for_each_independently(sequence, argument_provider)

    logger.info("Demo completed", callbacks=len(sequence))


def main(argv: Optional[list[str]] = None) -> int:
    """Command line entry point; takes no options and returns the exit status."""
    loader = ConfigLoader.create()
    merged = loader.merge_config()

    errors = ConfigValidator.validate_config(merged)
    if errors:
        raise ConfigurationError(
            f"Invalid configuration in {loader.config_dir}",
            errors=errors,
            context={"fields": [error.field for error in errors]},
        )

    config = loader.build_config(merged)
    configure_logging(
        level=config.logging.level,
        format_json=config.logging.format_json,
        include_timestamp=config.logging.include_timestamp,
    )

    run_demo(config)
    return 0
