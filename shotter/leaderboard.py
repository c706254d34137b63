"""High-score table kept in descending score order."""

from __future__ import annotations

import bisect
import os
from typing import Iterator, NamedTuple


class Entry(NamedTuple):
    """One line of the high-score table."""

    score: int
    name: str


class LeaderBoard:
    """Scores ordered from highest to lowest, ties kept in arrival order."""

    def __init__(self, capacity: int = 8) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._entries: list[Entry] = []

    def _add(self, score: int, name: str) -> None:
        bisect.insort(self._entries, Entry(score, name), key=lambda entry: -entry.score)

    def insert(self, score: int, name: str) -> None:
        """Add a score and drop the lowest ones beyond capacity."""
        self._add(score, name)
        del self._entries[self.capacity:]

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the table as one 'score name' line per entry."""
        with open(path, "w", encoding="utf-8") as file:
            for entry in self._entries:
                file.write(f"{entry.score} {entry.name}\n")

    def load(self, path: str | os.PathLike[str]) -> None:
        """Replace the table with the entries read from a saved file.

        Reading stops at the first pair that is not a score and a name.
        Raises OSError if the file cannot be opened, leaving the table as it was.
        """
        with open(path, encoding="utf-8") as file:
            text = file.read()
        self._entries.clear()
        tokens = iter(text.split())
        for score_token in tokens:
            name = next(tokens, None)
            if name is None:
                break
            try:
                score = int(score_token)
            except ValueError:
                break
            self._add(score, name)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)