"""
config.py - Defaults, limits and behaviour switches for credgen.

Most of this is plain constants. Two values can be overridden from the
environment so the app can be run with more logging or in light mode
without touching code:

    CREDGEN_LOG_LEVEL=DEBUG CREDGEN_THEME=light python main.py
"""

import os


# Fixed-charset / pronounceable length
DEFAULT_LENGTH = 16
MIN_LENGTH = 8
MAX_LENGTH = 64

# Passphrase word count
DEFAULT_WORD_COUNT = 4
MIN_WORD_COUNT = 3
MAX_WORD_COUNT = 8

DEFAULT_SEPARATOR = "-"
SEPARATORS = ["-", ".", "_", " "]

# How many previous credentials the window remembers
MAX_HISTORY = 5

# Copied credentials are wiped from the clipboard after this many ms
CLIPBOARD_CLEAR_MS = 15000

# Fill strategy for the fixed-charset generator:
#   "pool"  - every position is a uniform draw over the combined pool, so a
#             class with more characters shows up more often
#   "class" - pick a class uniformly, then a character uniformly within it
FILL_FROM_POOL = "pool"
FILL_BY_CLASS = "class"
DEFAULT_FILL_STRATEGY = FILL_FROM_POOL

# Pronounceable passwords are never truncated: "length" only decides the
# number of syllables, and the number + symbol suffix is appended on top.
# Set to True to trim the syllables so the result is exactly "length" long.
# Read on every call, so it can be changed at runtime.
PRONOUNCEABLE_EXACT_LENGTH = False

# The passphrase strength score counts the trailing number as a word.
# Also read on every call.
PASSPHRASE_COUNT_NUMBER_TOKEN = True

LOG_LEVEL = os.environ.get("CREDGEN_LOG_LEVEL", "WARNING").upper()

THEME = os.environ.get("CREDGEN_THEME", "dark").lower()
if THEME not in ("dark", "light"):
    THEME = "dark"
