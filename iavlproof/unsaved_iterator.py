"""Iteration over saved fast nodes merged with changes not yet saved."""

from __future__ import annotations

from typing import Container, Iterator, Mapping, Protocol


class DiskIterator(Protocol):
    """A sorted key/value iterator over saved fast nodes."""

    def valid(self) -> bool: ...

    def key(self) -> bytes: ...

    def value(self) -> bytes: ...

    def next(self) -> None: ...

    def close(self) -> None: ...


class UnsavedFastIterator:
    """Walk saved and unsaved key/value pairs together in key order.

    Unsaved additions take precedence over saved copies of the same key,
    and saved keys listed in ``removals`` are skipped. ``start`` is
    inclusive and ``end`` exclusive; either may be ``None`` for no bound.
    """

    def __init__(
        self,
        start: bytes | None,
        end: bytes | None,
        ascending: bool,
        disk_iterator: DiskIterator | None,
        additions: Mapping[bytes, bytes] | None,
        removals: Container[bytes] | None,
    ) -> None:
        if disk_iterator is None:
            raise ValueError("fast iterator must be created with a node database")
        if additions is None:
            raise ValueError(
                "unsaved fast iterator must be created with unsaved additions but they were None"
            )
        if removals is None:
            raise ValueError(
                "unsaved fast iterator must be created with unsaved removals but they were None"
            )
        self._start = start
        self._end = end
        self._ascending = ascending
        self._disk = disk_iterator
        self._additions = additions
        self._removals = removals
        self._next_key: bytes | None = None
        self._next_value: bytes | None = None
        self._pos = 0
        self._unsaved_keys = sorted(
            (
                key
                for key in additions
                if (start is None or key >= start) and (end is None or key < end)
            ),
            reverse=not ascending,
        )
        self.next()

    def domain(self) -> tuple[bytes | None, bytes | None]:
        """Return the ``(start, end)`` bounds of the iteration."""
        return self._start, self._end

    def valid(self) -> bool:
        """Return whether a current pair or further pairs remain."""
        if self._start is not None and self._end is not None:
            if not self._end > self._start:
                return False
        return (
            self._disk.valid()
            or self._pos < len(self._unsaved_keys)
            or (self._next_key is not None and self._next_value is not None)
        )

    def key(self) -> bytes | None:
        """Return the current key."""
        return self._next_key

    def value(self) -> bytes | None:
        """Return the current value."""
        return self._next_value

    def _take_unsaved(self) -> None:
        key = self._unsaved_keys[self._pos]
        self._next_key = key
        self._next_value = self._additions[key]
        self._pos += 1

    def _take_disk(self) -> None:
        self._next_key = self._disk.key()
        self._next_value = self._disk.value()
        self._disk.next()

    def next(self) -> None:
        """Advance to the next pair in order."""
        while True:
            disk_valid = self._disk.valid()
            has_unsaved = self._pos < len(self._unsaved_keys)
            if disk_valid:
                disk_key = self._disk.key()
                if disk_key in self._removals:
                    self._disk.next()
                    continue
                if has_unsaved:
                    unsaved_key = self._unsaved_keys[self._pos]
                    if self._ascending:
                        unsaved_next = disk_key >= unsaved_key
                    else:
                        unsaved_next = disk_key <= unsaved_key
                    if unsaved_next:
                        if disk_key == unsaved_key:
                            # The unsaved update replaces the saved copy.
                            self._disk.next()
                        self._take_unsaved()
                    else:
                        self._take_disk()
                    return
                self._take_disk()
                return
            if has_unsaved:
                self._take_unsaved()
                return
            self._next_key = None
            self._next_value = None
            return

    def close(self) -> None:
        """Close the underlying disk iterator."""
        self._disk.close()

    def __iter__(self) -> Iterator[tuple[bytes, bytes]]:
        while self.valid():
            key, value = self._next_key, self._next_value
            if key is None or value is None:
                return
            yield key, value
            self.next()