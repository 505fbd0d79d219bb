from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional
from uuid import UUID

from .models import TodoItem

logger = logging.getLogger(__name__)


class TodoList:
    """Ordered, in-memory collection of todo items.

    All access goes through an internal lock so the list can be shared by
    request handlers running on worker threads.
    """

    def __init__(self, case_sensitive_search: bool = False):
        self.case_sensitive_search = case_sensitive_search
        self._items: List[TodoItem] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _find(self, todo_id: UUID) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == todo_id:
                return index
        return None

    def add(self, description: str) -> TodoItem:
        item = TodoItem(description=description)
        with self._lock:
            self._items.append(item)
        logger.debug("Added todo %s", item.id)
        return item

    def get(self, todo_id: UUID) -> Optional[TodoItem]:
        with self._lock:
            index = self._find(todo_id)
            return self._items[index] if index is not None else None

    def toggle_done(self, todo_id: UUID) -> Optional[TodoItem]:
        """Flip the done flag of an item. Returns None when the id is unknown."""
        with self._lock:
            index = self._find(todo_id)
            if index is None:
                return None
            item = self._items[index]
            item.done = not item.done
            return item

    def delete(self, todo_id: UUID) -> bool:
        with self._lock:
            index = self._find(todo_id)
            if index is None:
                return False
            del self._items[index]
            return True

    def reorder(self, ids_in_order: Iterable[UUID]) -> None:
        """Rearrange items to follow ``ids_in_order``.

        Listed ids come first in the given order. Unknown ids are ignored and
        a repeated id only counts at its first position. Items that were not
        listed keep their relative order and go after the listed ones.
        """
        with self._lock:
            by_id = {item.id: item for item in self._items}
            ordered: List[TodoItem] = []
            seen = set()
            for todo_id in ids_in_order:
                if todo_id in seen or todo_id not in by_id:
                    continue
                seen.add(todo_id)
                ordered.append(by_id[todo_id])
            ordered.extend(item for item in self._items if item.id not in seen)
            self._items = ordered

    def search(self, text: str) -> List[TodoItem]:
        with self._lock:
            if not text:
                return list(self._items)
            if self.case_sensitive_search:
                return [item for item in self._items if text in item.description]
            needle = text.casefold()
            return [item for item in self._items if needle in item.description.casefold()]

    def todos(self) -> List[TodoItem]:
        with self._lock:
            return list(self._items)
