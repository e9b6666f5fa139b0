"""
Playlist store: ordered, deduplicated collection of playable items.

In-memory only; created empty with the session and discarded with it.
"""

from typing import Iterator, List, Optional, Tuple

from loguru import logger

from tuneflow.domain.catalog.models import PlayableItem


class PlaylistStore:
    """Ordered playlist keyed by item id.

    Insertion order is meaningful. Appending an item whose id is already
    present is a no-op.
    """

    def __init__(self, items: Optional[List[PlayableItem]] = None) -> None:
        self._items: List[PlayableItem] = []
        for item in items or []:
            self.append(item)

    def append(self, item: PlayableItem) -> Tuple[int, int]:
        """Append an item unless its id is already queued.

        Returns:
            (size after the call, index the item occupies)
        """
        existing = self.index_of(item.id)
        if existing != -1:
            logger.debug(f"Item {item.id} already in playlist at {existing}")
            return len(self._items), existing

        self._items.append(item)
        return len(self._items), len(self._items) - 1

    def remove_at(self, index: int) -> Optional[PlayableItem]:
        """Remove the item at index, shifting later items left.

        Returns:
            The removed item, or None if index is out of bounds
        """
        if not 0 <= index < len(self._items):
            logger.debug(f"Ignoring remove at {index}: playlist has {len(self._items)} items")
            return None
        return self._items.pop(index)

    def index_of(self, identifier: str) -> int:
        """Position of the item with this id, or -1 if absent."""
        for i, item in enumerate(self._items):
            if item.id == identifier:
                return i
        return -1

    def items(self) -> List[PlayableItem]:
        return list(self._items)

    def __getitem__(self, index: int) -> PlayableItem:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return isinstance(item, PlayableItem) and self.index_of(item.id) != -1

    def __iter__(self) -> Iterator[PlayableItem]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)
