from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable, Iterator, List, Tuple

from swapview.errors import DrawableIndexError
from swapview.utils.index_ring import bound


@dataclass(slots=True)
class DrawableList:
    """Ordered image identifiers; order defines next/previous adjacency.

    Duplicates are allowed. The list only grows through ``insert_at`` and is
    only ever shrunk by a wholesale ``replace_all``.
    """
    items: List[Hashable] = field(default_factory=list)

    def replace_all(self, items: Iterable[Hashable]) -> None:
        self.items = list(items)

    def insert_at(self, position: int, image: Hashable) -> int:
        """Insert ``image`` before ``position`` (clamped) and return where it landed."""
        pos = bound(position, 0, len(self.items))
        self.items.insert(pos, image)
        return pos

    def get(self, index: int) -> Hashable:
        # No negative indexing: callers clamp before asking.
        if not 0 <= index < len(self.items):
            raise DrawableIndexError(index, len(self.items))
        return self.items[index]

    def as_tuple(self) -> Tuple[Hashable, ...]:
        return tuple(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(tuple(self.items))
