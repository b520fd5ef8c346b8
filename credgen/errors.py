"""
errors.py - Exceptions raised by the credential engine.

Only two things can go wrong inside the engine:
1. The operating system cannot give us secure random bytes
2. The caller asked for something that makes no sense (length 0, etc.)

Everything else (no character class selected, for example) has a
well-defined answer and is not an error.
"""


class CredgenError(Exception):
    """Base class for every error the engine raises."""


class EntropySourceUnavailable(CredgenError):
    """
    The cryptographically secure random source cannot be used.

    This is never recovered from inside the engine. Generating a password
    from a weaker source would look fine to the user and be silently
    guessable, so the failure has to reach them instead.
    """


class InvalidParameters(CredgenError, ValueError):
    """A length, word count, separator or mode was out of range."""
