"""
engine.py - One entry point for the three generator modes.

The window only knows which mode is selected and what the sliders say.
This module turns that into the right generator call and scores the
result, so the window never has to branch on mode itself.
"""

import logging
from enum import Enum
from typing import Optional, Tuple

from credgen import config
from credgen.charsets import GenerationOptions
from credgen.errors import InvalidParameters
from credgen.password_gen import generate_passphrase, generate_password, generate_pronounceable
from credgen.random_source import RandomSource, default_source
from credgen.strength import StrengthResult, estimate_strength


logger = logging.getLogger(__name__)


class Mode(str, Enum):
    RANDOM = "random"
    PRONOUNCEABLE = "pronounceable"
    PASSPHRASE = "passphrase"


def _as_mode(mode) -> Mode:
    try:
        return Mode(mode)
    except ValueError:
        raise InvalidParameters(f"Unknown mode: {mode!r}") from None


def generate(
    mode,
    length: int = config.DEFAULT_LENGTH,
    word_count: int = config.DEFAULT_WORD_COUNT,
    separator: str = config.DEFAULT_SEPARATOR,
    options: Optional[GenerationOptions] = None,
    source: RandomSource = default_source,
) -> str:
    """
    Generate a credential in the given mode.

    length is used by "random" and "pronounceable", word_count and separator
    by "passphrase", and options by "random" only.
    """
    mode = _as_mode(mode)
    if mode is Mode.RANDOM:
        return generate_password(length, options, source=source)
    if mode is Mode.PRONOUNCEABLE:
        return generate_pronounceable(length, source=source)
    return generate_passphrase(word_count, separator, source=source)


def generate_with_strength(
    mode,
    length: int = config.DEFAULT_LENGTH,
    word_count: int = config.DEFAULT_WORD_COUNT,
    separator: str = config.DEFAULT_SEPARATOR,
    options: Optional[GenerationOptions] = None,
    source: RandomSource = default_source,
) -> Tuple[str, StrengthResult]:
    """Generate a credential and score it with the same parameters."""
    mode = _as_mode(mode)
    if options is None:
        options = GenerationOptions()
    credential = generate(mode, length, word_count, separator, options, source)
    strength = estimate_strength(credential, options, mode.value, separator)
    logger.debug("Generated %s credential, strength %s", mode.value, strength.label)
    return credential, strength
