"""Fresh-name generation shared by alpha-renaming and variable creation."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from itertools import count


class NameSupply:
    """Hands out names that were never handed out or reserved before.

    A supply is owned by whoever performs the renaming; sharing one across
    threads is safe because the counter and the taken-set are updated under a
    lock.
    """

    def __init__(self, taken: Iterable[str] = ()) -> None:
        self._taken = set(taken)
        self._counter = count(1)
        self._lock = threading.Lock()

    def reserve(self, *names: str) -> None:
        with self._lock:
            self._taken.update(names)

    def is_taken(self, name: str) -> bool:
        with self._lock:
            return name in self._taken

    def fresh(self, base: str = "x") -> str:
        """Return ``base`` suffixed with the next unused counter value."""

        with self._lock:
            while True:
                candidate = f"{base}{next(self._counter)}"
                if candidate not in self._taken:
                    self._taken.add(candidate)
                    return candidate


__all__ = ["NameSupply"]
