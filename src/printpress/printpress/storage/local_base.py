from __future__ import annotations

from typing import Callable, ClassVar, Generic, List, Optional, TypeVar

from ..common.patches import Patch
from .local_state import LocalStateStore

T = TypeVar("T")


class LocalRepositoryBase(Generic[T]):
    """Shared list handling for repositories backed by :class:`LocalStateStore`.

    Subclasses name the ``AppState`` list they own and the id attribute of
    its records.
    """

    collection: ClassVar[str]
    key: ClassVar[str]

    def __init__(self, store: LocalStateStore):
        self._store = store

    def _items(self) -> List[T]:
        return getattr(self._store.state, self.collection)

    def _find(self, record_id: str) -> Optional[T]:
        for item in self._items():
            if getattr(item, self.key) == record_id:
                return item
        return None

    def _filter(self, *predicates: Callable[[T], bool]) -> List[T]:
        return [item for item in self._items() if all(p(item) for p in predicates)]

    def _insert(self, record: T) -> str:
        self._items().append(record)
        self._store.save()
        return getattr(record, self.key)

    def _patch(self, record_id: str, patch: Patch) -> bool:
        items = self._items()
        for i, item in enumerate(items):
            if getattr(item, self.key) == record_id:
                items[i] = patch.apply(item)
                self._store.save()
                return True
        return False

    def _remove(self, record_id: str) -> bool:
        items = self._items()
        for i, item in enumerate(items):
            if getattr(item, self.key) == record_id:
                del items[i]
                self._store.save()
                return True
        return False
