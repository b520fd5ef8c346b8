"""
charsets.py - Character classes and the options record for random passwords.
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Tuple


class CharacterClass(Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"


# Order matters: required characters and the combined pool follow it
CLASS_ORDER: Tuple[CharacterClass, ...] = (
    CharacterClass.UPPERCASE,
    CharacterClass.LOWERCASE,
    CharacterClass.NUMBERS,
    CharacterClass.SYMBOLS,
)

ALPHABETS: Mapping[CharacterClass, str] = {
    CharacterClass.UPPERCASE: string.ascii_uppercase,   # A-Z
    CharacterClass.LOWERCASE: string.ascii_lowercase,   # a-z
    CharacterClass.NUMBERS: string.digits,              # 0-9
    CharacterClass.SYMBOLS: "!@#$%^&*()_+-=[]{}|;:,.<>?",
}

# Glyphs that are easy to misread in many fonts
SIMILAR_CHARS = frozenset("0O1lI|`")


@dataclass(frozen=True)
class GenerationOptions:
    """Which character classes to use, plus the two optional constraints."""

    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    symbols: bool = False
    exclude_similar: bool = False
    must_contain_each: bool = False

    def enabled_classes(self) -> Tuple[CharacterClass, ...]:
        return tuple(c for c in CLASS_ORDER if getattr(self, c.value))

    @property
    def variety(self) -> int:
        """Number of enabled classes (0-4)."""
        return len(self.enabled_classes())


def strip_similar(alphabet: str) -> str:
    return "".join(c for c in alphabet if c not in SIMILAR_CHARS)


def filtered_alphabets(
    options: GenerationOptions,
    alphabets: Mapping[CharacterClass, str] = ALPHABETS,
) -> Dict[CharacterClass, str]:
    """
    Alphabets of the enabled classes, with similar glyphs removed if asked.

    A class whose alphabet ends up empty is left out entirely, so callers
    never have to special-case it.
    """
    result = {}
    for char_class in options.enabled_classes():
        chars = alphabets.get(char_class, "")
        if options.exclude_similar:
            chars = strip_similar(chars)
        if chars:
            result[char_class] = chars
    return result
