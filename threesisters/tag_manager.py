"""A pool that attaches string tags to arbitrary objects."""

from __future__ import annotations

from typing import Any, TypeVar

from sortedcontainers import SortedDict

T = TypeVar("T")


class TagError(RuntimeError):
    """Raised when a tag lookup or replacement cannot be satisfied."""


class TagManager:
    """Holds (tag, object) pairs, ordered by tag then by insertion.

    Objects are matched by identity; lookups by kind match the exact class
    the object had when it was tagged.
    """

    def __init__(self) -> None:
        self._pool: SortedDict = SortedDict()

    def _entries(self):
        for tag, entries in self._pool.items():
            for obj, kind in entries:
                yield tag, obj, kind

    def add_tag(self, tag: str, obj: Any) -> None:
        """Add ``obj`` to the pool under ``tag``."""
        self._pool.setdefault(tag, []).append((obj, type(obj)))

    def get_all_with_tag(self, tag: str, kind: type[T]) -> list[T]:
        """Return every object of exactly ``kind`` tagged ``tag``."""
        if not self._pool:
            raise TagError("tag pool is empty")
        if tag not in self._pool:
            raise TagError(f"tag {tag!r} not found")
        found = [obj for obj, stored in self._pool[tag] if stored is kind]
        if not found:
            raise TagError(
                f"no object of type {kind.__name__} is tagged {tag!r}"
            )
        return found

    def get_tag_of(self, obj: Any) -> str | None:
        """Return the first tag of ``obj``, or ``None`` if it is not tagged."""
        return next((tag for tag, item, _ in self._entries() if item is obj), None)

    def has_tag(self, tag: str, obj: Any) -> bool:
        """Return whether ``obj`` is in the pool under ``tag``."""
        return any(item is obj for item, _ in self._pool.get(tag, ()))

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._pool.values())

    def replace_tag(self, tag: str, obj: Any) -> None:
        """Remove every tag of ``obj`` and tag it afresh with ``tag``."""
        if not self.remove_object(obj):
            raise TagError("object is not in the tag pool")
        self.add_tag(tag, obj)

    def _filter(self, keep) -> bool:
        removed = False
        for tag in list(self._pool):
            entries = self._pool[tag]
            kept = [entry for entry in entries if keep(tag, *entry)]
            if len(kept) != len(entries):
                removed = True
                if kept:
                    self._pool[tag] = kept
                else:
                    del self._pool[tag]
        return removed

    def remove_object(self, obj: Any) -> bool:
        """Remove ``obj`` under every tag; return whether anything went."""
        return self._filter(lambda _tag, item, _kind: item is not obj)

    def remove_by_tag(self, tag: str, kind: type) -> None:
        """Remove every object of exactly ``kind`` tagged ``tag``."""
        self._filter(lambda t, _item, stored: not (t == tag and stored is kind))