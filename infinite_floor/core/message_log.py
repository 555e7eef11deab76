"""
Message log for the dungeon crawler.

Holds the short, newest-first history of game messages shown next to the map.
"""

from collections import deque
from collections.abc import Iterator

from .constants import MESSAGE_LOG_SIZE


class MessageLog:
    """
    Bounded, newest-first sequence of messages.

    Pushing beyond the capacity evicts the oldest message.
    """

    def __init__(self, capacity: int = MESSAGE_LOG_SIZE) -> None:
        self.capacity = capacity
        self._messages: deque[str] = deque(maxlen=capacity)

    def push(self, message: str) -> None:
        """Adds a message in front of the log."""
        self._messages.appendleft(message)

    def clear(self) -> None:
        self._messages.clear()

    @property
    def latest(self) -> str | None:
        """Returns the newest message, or None if the log is empty."""
        return self._messages[0] if self._messages else None

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __getitem__(self, index: int) -> str:
        return self._messages[index]

    def __contains__(self, message: object) -> bool:
        return message in self._messages
