"""
password_gen.py - The three credential generators.

How this works:
1. generate_password(): random characters from the character classes the
   user ticked, optionally without look-alike glyphs and optionally with
   at least one character of every ticked class
2. generate_pronounceable(): two-letter syllables glued together, with a
   number and a symbol on the end ("BakoRefi42!")
3. generate_passphrase(): dictionary words joined by a separator, with a
   number on the end ("Falcon-river-ember-piano-17")

All three draw every random value from a RandomSource (secrets under the
hood). None of them keep state between calls, and none call each other.
"""

import logging
import math
from typing import List, Mapping, Optional

from credgen import config
from credgen.charsets import ALPHABETS, CharacterClass, GenerationOptions, filtered_alphabets
from credgen.errors import InvalidParameters
from credgen.random_source import RandomSource, default_source
from credgen.wordlists import PRONOUNCEABLE_SYMBOLS, SYLLABLES, WORD_LIST


logger = logging.getLogger(__name__)

# Shortest length that still leaves room for a syllable character
# in front of a 3-character suffix ("99!") when trimming to length
MIN_EXACT_PRONOUNCEABLE_LENGTH = 4


def _require_positive(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidParameters(f"{name} must be a positive integer, got {value!r}")
    return value


def _capitalize_first(text: str) -> str:
    # str.capitalize() would also lowercase the rest
    return text[:1].upper() + text[1:]


def generate_password(
    length: int,
    options: Optional[GenerationOptions] = None,
    fill_strategy: str = config.DEFAULT_FILL_STRATEGY,
    alphabets: Mapping[CharacterClass, str] = ALPHABETS,
    source: RandomSource = default_source,
) -> str:
    """
    Generate a random password from the selected character classes.

    The approach:
    1. Build each enabled class's alphabet, minus look-alikes if requested
    2. If must_contain_each is set, reserve one character per class
    3. Fill the rest of the length from the combined pool
    4. Shuffle only when step 2 reserved something, so the reserved
       characters don't always sit at the front

    Args:
        length: Number of characters to produce
        options: Character classes and constraints (defaults to
            GenerationOptions())
        fill_strategy: config.FILL_FROM_POOL or config.FILL_BY_CLASS
        alphabets: Alphabet per class, for callers that need their own sets
        source: Where random numbers come from

    Returns:
        The password, or "" if no class has any characters left

    Raises:
        InvalidParameters: length is not positive, is shorter than the number
            of required characters, or fill_strategy is unknown
        EntropySourceUnavailable: the secure random source failed
    """
    _require_positive(length, "length")
    if fill_strategy not in (config.FILL_FROM_POOL, config.FILL_BY_CLASS):
        raise InvalidParameters(f"Unknown fill strategy: {fill_strategy!r}")
    if options is None:
        options = GenerationOptions()

    class_chars = filtered_alphabets(options, alphabets)
    if not class_chars:
        return ""

    required: List[str] = []
    if options.must_contain_each:
        if length < len(class_chars):
            raise InvalidParameters(
                f"Length must be at least {len(class_chars)} to include every selected type."
            )
        required = [source.choice(chars) for chars in class_chars.values()]

    logger.debug(
        "Generating password: length=%d classes=%s fill=%s",
        length, [c.value for c in class_chars], fill_strategy,
    )

    remaining = length - len(required)
    if fill_strategy == config.FILL_FROM_POOL:
        pool = "".join(class_chars.values())
        filled = [source.choice(pool) for _ in range(remaining)]
    else:
        groups = list(class_chars.values())
        filled = [source.choice(source.choice(groups)) for _ in range(remaining)]

    if required:
        return "".join(source.shuffle(required + filled))
    return "".join(filled)


def generate_pronounceable(
    length: int,
    exact_length: Optional[bool] = None,
    source: RandomSource = default_source,
) -> str:
    """
    Generate an easy-to-say password like "BakoRefi42!".

    ceil(length / 2) syllables are used, so the syllables alone already
    reach length; the number and symbol are then added on top. Unless
    exact_length is set, nothing is cut off and the result is longer than
    length.

    Args:
        length: Target length
        exact_length: Trim the syllables so the result is exactly length
            characters (length must then be at least 4). None means
            config.PRONOUNCEABLE_EXACT_LENGTH
        source: Where random numbers come from
    """
    if exact_length is None:
        exact_length = config.PRONOUNCEABLE_EXACT_LENGTH
    _require_positive(length, "length")
    if exact_length and length < MIN_EXACT_PRONOUNCEABLE_LENGTH:
        raise InvalidParameters(
            f"Length must be at least {MIN_EXACT_PRONOUNCEABLE_LENGTH} for an exact-length "
            f"pronounceable password."
        )

    logger.debug("Generating pronounceable: length=%d exact=%s", length, exact_length)

    syllables = []
    for i in range(math.ceil(length / 2)):
        syllable = source.choice(SYLLABLES)
        # First syllable always capitalized, the rest one time in three
        if i == 0 or source.next_int(3) == 0:
            syllable = _capitalize_first(syllable)
        syllables.append(syllable)
    body = "".join(syllables)

    suffix = str(source.next_int(100)) + source.choice(PRONOUNCEABLE_SYMBOLS)

    if exact_length:
        body = body[:length - len(suffix)]
    return body + suffix


def generate_passphrase(
    word_count: int = config.DEFAULT_WORD_COUNT,
    separator: str = config.DEFAULT_SEPARATOR,
    source: RandomSource = default_source,
) -> str:
    """
    Generate a passphrase from random dictionary words.

    Words are drawn independently, so the same word can appear twice. Only
    the first word is capitalized, and a number from 0 to 99 is appended as
    one more separator-joined token.

    Args:
        word_count: Number of words (not counting the trailing number)
        separator: Text placed between tokens; must not be empty

    Returns:
        Passphrase such as "Coral-night-xenon-maple-7"
    """
    _require_positive(word_count, "word_count")
    if not isinstance(separator, str) or not separator:
        raise InvalidParameters("separator must be a non-empty string")

    logger.debug("Generating passphrase: words=%d separator=%r", word_count, separator)

    words = [source.choice(WORD_LIST) for _ in range(word_count)]
    words[0] = _capitalize_first(words[0])
    words.append(str(source.next_int(100)))

    return separator.join(words)
