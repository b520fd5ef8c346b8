"""
wordlists.py - Lookup tables for passphrases and pronounceable passwords.

These are deliberately small. 64 words gives 6 bits per passphrase word,
which is why the passphrase generator is meant for 4+ words. A diceware
list (7776 words, ~12.9 bits each) could be dropped in here without
changing any other code.
"""

from typing import Tuple


WORD_LIST: Tuple[str, ...] = (
    "apple", "brave", "cloud", "delta", "eagle", "flame", "grape", "hotel",
    "ivory", "jazz", "kite", "lemon", "mango", "night", "ocean", "piano",
    "queen", "river", "storm", "tiger", "ultra", "vivid", "water", "xenon",
    "yacht", "zebra", "alpha", "blaze", "coral", "dawn", "ember", "frost",
    "glide", "honey", "indie", "jewel", "karma", "lunar", "maple", "noble",
    "oasis", "pearl", "quest", "royal", "solar", "trend", "urban", "vital",
    "whale", "xray", "youth", "zephyr", "amber", "beach", "crisp", "drift",
    "echo", "fern", "glow", "haven", "isle", "jade", "keen", "light",
)

# Consonant + vowel pairs
SYLLABLES: Tuple[str, ...] = (
    "ba", "be", "bi", "bo", "bu", "ca", "ce", "ci", "co", "cu",
    "da", "de", "di", "do", "du", "fa", "fe", "fi", "fo", "fu",
    "ga", "ge", "gi", "go", "gu", "ha", "he", "hi", "ho", "hu",
    "ja", "je", "ji", "jo", "ju", "ka", "ke", "ki", "ko", "ku",
    "la", "le", "li", "lo", "lu", "ma", "me", "mi", "mo", "mu",
    "na", "ne", "ni", "no", "nu", "pa", "pe", "pi", "po", "pu",
    "ra", "re", "ri", "ro", "ru", "sa", "se", "si", "so", "su",
    "ta", "te", "ti", "to", "tu", "va", "ve", "vi", "vo", "vu",
    "wa", "we", "wi", "wo", "xa", "xe", "ya", "ye", "yo", "za",
    "ze", "zi", "zo", "zu",
)

# Suffix symbols for pronounceable passwords (easy to type on most layouts)
PRONOUNCEABLE_SYMBOLS = "!@#$%&*"
