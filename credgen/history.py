"""
history.py - The short "Recent" list shown under the generator.

Kept in memory only. Nothing here is ever written to disk.
"""

from typing import List

from credgen import config


class CredentialHistory:
    """
    Most-recent-first list of credentials the user has moved past.

    Usage:
        history = CredentialHistory()
        history.record(previous=current, new=fresh)
    """

    def __init__(self, max_size: int = config.MAX_HISTORY):
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self.max_size = max_size
        self._items: List[str] = []

    def record(self, previous: str, new: str) -> bool:
        """
        Remember `previous` now that `new` has replaced it.

        Nothing is recorded when either value is empty or when the
        credential did not actually change. An older copy of `previous`
        is moved to the front instead of being listed twice.

        Returns:
            True if the list changed
        """
        if not new or not previous or previous == new:
            return False
        self._items = [previous] + [item for item in self._items if item != previous]
        del self._items[self.max_size:]
        return True

    def clear(self):
        self._items = []

    @property
    def items(self) -> List[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))
