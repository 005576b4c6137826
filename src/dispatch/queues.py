from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterable, Iterator, List, Optional


class FloorQueue:
    """Ordered set of floors served in one sweep direction.

    The next stop is the lowest floor of an ascending queue and the highest
    floor of a descending one. Ranks are stored sorted so that the next stop
    sits at the end of the list and ``pop`` does not shift anything.
    """

    def __init__(self, descending: bool = False, floors: Iterable[int] = ()) -> None:
        self.descending = descending
        self._ranks: List[int] = []
        for floor in floors:
            self.add(floor)

    def _rank(self, floor: int) -> int:
        # larger rank = served sooner; the mapping is its own inverse
        return floor if self.descending else -floor

    def _index(self, floor: int) -> Optional[int]:
        rank = self._rank(floor)
        index = bisect_left(self._ranks, rank)
        if index < len(self._ranks) and self._ranks[index] == rank:
            return index
        return None

    def add(self, floor: int) -> bool:
        """Insert ``floor``; returns False when it was already queued."""
        if self._index(floor) is not None:
            return False
        insort(self._ranks, self._rank(floor))
        return True

    def discard(self, floor: int) -> None:
        index = self._index(floor)
        if index is not None:
            del self._ranks[index]

    def peek(self) -> Optional[int]:
        if not self._ranks:
            return None
        return self._rank(self._ranks[-1])

    def pop(self) -> int:
        if not self._ranks:
            raise IndexError("pop from an empty floor queue")
        return self._rank(self._ranks.pop())

    def to_list(self) -> List[int]:
        return [self._rank(rank) for rank in reversed(self._ranks)]

    def __contains__(self, floor: object) -> bool:
        return isinstance(floor, int) and self._index(floor) is not None

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self._ranks)

    def __bool__(self) -> bool:
        return bool(self._ranks)

    def __repr__(self) -> str:
        order = "desc" if self.descending else "asc"
        return f"FloorQueue({order}, {self.to_list()})"
