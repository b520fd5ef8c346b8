"""
random_source.py - The only place credgen gets randomness from.

How this works:
1. Every draw goes through secrets.randbelow(), which reads from the OS
   CSPRNG (/dev/urandom, getrandom(), BCryptGenRandom...)
2. randbelow() uses rejection sampling, so next_int(n) has no modulo bias
3. shuffle() is a plain Fisher-Yates driven by next_int()

We never touch the `random` module. If the OS refuses to hand out random
bytes we raise EntropySourceUnavailable instead of quietly using something
weaker.
"""

import secrets
from typing import Callable, List, Optional, Sequence, TypeVar

from credgen.errors import EntropySourceUnavailable, InvalidParameters


T = TypeVar("T")


class RandomSource:
    """
    Uniform integers and shuffles from a cryptographically secure source.

    Args:
        randbelow: Function returning a uniform int in [0, n). Defaults to
            secrets.randbelow. Tests pass a scripted function here.
    """

    def __init__(self, randbelow: Optional[Callable[[int], int]] = None):
        self._randbelow = randbelow

    def next_int(self, max_value: int) -> int:
        """Return an integer uniformly distributed over [0, max_value)."""
        if isinstance(max_value, bool) or not isinstance(max_value, int) or max_value <= 0:
            raise InvalidParameters(f"max must be a positive integer, got {max_value!r}")

        # Looked up on every call so a patched secrets.randbelow is honoured
        randbelow = self._randbelow or secrets.randbelow
        try:
            return randbelow(max_value)
        except (NotImplementedError, OSError) as e:
            raise EntropySourceUnavailable(
                "The operating system's secure random source is unavailable."
            ) from e

    def choice(self, seq: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence uniformly."""
        if not seq:
            raise InvalidParameters("Cannot choose from an empty sequence.")
        return seq[self.next_int(len(seq))]

    def shuffle(self, seq: Sequence[T]) -> List[T]:
        """
        Return a new list with the elements of seq in uniformly random order.

        The input is left untouched.
        """
        result = list(seq)
        for i in range(len(result) - 1, 0, -1):
            j = self.next_int(i + 1)
            result[i], result[j] = result[j], result[i]
        return result


# Shared by all generators
default_source = RandomSource()
