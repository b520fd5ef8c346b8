"""
strength.py - Coarse strength score for generated credentials.

This is a display hint, not an entropy calculation. Character-based
passwords are scored from their length and from how many character
classes were *selected* (the actual characters are never inspected).
Passphrases are scored from their token count alone.

Score to label:

    0 None    empty credential
    1 Weak
    2 Fair
    3 Good
    4 Strong
"""

from typing import NamedTuple, Optional

from credgen import config
from credgen.charsets import GenerationOptions


LABELS = ("", "Weak", "Fair", "Good", "Strong")

MODE_PASSPHRASE = "passphrase"


class StrengthResult(NamedTuple):
    score: int
    label: str


EMPTY_RESULT = StrengthResult(0, "None")


def _passphrase_score(token_count: int) -> int:
    if token_count >= 5:
        return 4
    if token_count >= 4:
        return 3
    if token_count >= 3:
        return 2
    return 1


def estimate_strength(
    password: str,
    options: Optional[GenerationOptions] = None,
    mode: str = "random",
    separator: str = config.DEFAULT_SEPARATOR,
    count_number_token: Optional[bool] = None,
) -> StrengthResult:
    """
    Score a credential from 0 to 4.

    Args:
        password: The generated credential
        options: Options it was generated with (ignored for passphrases)
        mode: "random", "pronounceable" or "passphrase"
        separator: Passphrase separator, used to count tokens
        count_number_token: Count the passphrase's trailing number as a word.
            None means config.PASSPHRASE_COUNT_NUMBER_TOKEN, which is on by
            default and makes "a-b-c-4" score like four words.

    Returns:
        StrengthResult(score, label)
    """
    if not password:
        return EMPTY_RESULT

    # Accept Mode members as well as plain strings
    mode = getattr(mode, "value", mode)

    if mode == MODE_PASSPHRASE:
        if count_number_token is None:
            count_number_token = config.PASSPHRASE_COUNT_NUMBER_TOKEN
        tokens = len(password.split(separator)) if separator else 1
        if not count_number_token and tokens > 1:
            tokens -= 1
        score = _passphrase_score(tokens)
        return StrengthResult(score, LABELS[score])

    if options is None:
        options = GenerationOptions()
    variety = options.variety
    length = len(password)

    score = 0
    if length >= 8:
        score += 1
    if length >= 16:
        score += 1
    if variety >= 2:
        score += 1
    if variety >= 4:
        score += 1

    score = min(4, max(1, score))
    return StrengthResult(score, LABELS[score])
