import pytest

from iavlproof.unsaved_iterator import UnsavedFastIterator


class _ListIterator:
    def __init__(self, data, start=None, end=None, ascending=True):
        self._items = sorted(
            (
                (k, v)
                for k, v in data.items()
                if (start is None or k >= start) and (end is None or k < end)
            ),
            reverse=not ascending,
        )
        self._pos = 0
        self.closed = False

    def valid(self):
        return self._pos < len(self._items)

    def key(self):
        return self._items[self._pos][0]

    def value(self):
        return self._items[self._pos][1]

    def next(self):
        self._pos += 1

    def close(self):
        self.closed = True


def _make(disk, additions, removals, start=None, end=None, ascending=True):
    return UnsavedFastIterator(
        start,
        end,
        ascending,
        _ListIterator(disk, start, end, ascending),
        additions,
        removals,
    )


DISK = {b"a": b"1", b"c": b"3", b"e": b"5"}
ADDITIONS = {b"b": b"2", b"c": b"33", b"f": b"6"}


def test_ascending_merge_prefers_unsaved():
    it = _make(DISK, ADDITIONS, set())
    assert list(it) == [
        (b"a", b"1"),
        (b"b", b"2"),
        (b"c", b"33"),
        (b"e", b"5"),
        (b"f", b"6"),
    ]


def test_descending_merge():
    it = _make(DISK, ADDITIONS, set(), ascending=False)
    assert [k for k, _ in it] == [b"f", b"e", b"c", b"b", b"a"]


def test_removed_disk_keys_are_skipped():
    it = _make(DISK, ADDITIONS, {b"a", b"e"})
    assert [k for k, _ in it] == [b"b", b"c", b"f"]


def test_removals_as_mapping():
    it = _make(DISK, {}, {b"c": True})
    assert [k for k, _ in it] == [b"a", b"e"]


def test_range_bounds_start_inclusive_end_exclusive():
    it = _make(DISK, ADDITIONS, set(), start=b"b", end=b"f")
    assert [k for k, _ in it] == [b"b", b"c", b"e"]


def test_empty_domain_is_invalid():
    it = _make(DISK, ADDITIONS, set(), start=b"d", end=b"b")
    assert it.valid() is False
    assert list(it) == []


def test_all_removed_and_no_additions():
    it = _make(DISK, {}, set(DISK))
    assert it.valid() is False
    assert it.key() is None
    assert it.value() is None


def test_only_unsaved():
    it = _make({}, ADDITIONS, set())
    assert list(it) == sorted(ADDITIONS.items())


def test_manual_stepping():
    it = _make(DISK, ADDITIONS, set())
    seen = []
    while it.valid():
        seen.append((it.key(), it.value()))
        it.next()
    assert seen == sorted({**DISK, **ADDITIONS}.items())


def test_domain_returns_bounds():
    it = _make(DISK, ADDITIONS, set(), start=b"b", end=b"z")
    assert it.domain() == (b"b", b"z")


def test_close_closes_disk_iterator():
    disk = _ListIterator(DISK)
    it = UnsavedFastIterator(None, None, True, disk, {}, set())
    it.close()
    assert disk.closed is True


@pytest.mark.parametrize(
    "disk, additions, removals",
    [
        (None, {}, set()),
        (_ListIterator({}), None, set()),
        (_ListIterator({}), {}, None),
    ],
)
def test_missing_arguments_raise(disk, additions, removals):
    with pytest.raises(ValueError):
        UnsavedFastIterator(None, None, True, disk, additions, removals)