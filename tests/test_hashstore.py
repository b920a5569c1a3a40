from ktpbench.hashstore import HashStore
from ktpbench.records import KTP


def _records():
    return [
        KTP(5, "Eko Wijaya", "02-03-1990"),
        KTP(1, "Ani Halim", "10-11-1980"),
        KTP(3, "Budi Santoso", "01-01-2000"),
    ]


def test_search_finds_record():
    store = HashStore(_records())
    assert store.search(3) == KTP(3, "Budi Santoso", "01-01-2000")


def test_search_missing_returns_none():
    store = HashStore(_records())
    assert store.search(4) is None


def test_search_range_is_ordered_and_inclusive():
    store = HashStore(_records())
    assert [r.id for r in store.search_range(1, 5)] == [1, 3, 5]
    assert [r.id for r in store.search_range(2, 3)] == [3]


def test_search_range_reversed_bounds_is_empty():
    store = HashStore(_records())
    assert store.search_range(5, 1) == []


def test_wide_range_matches_narrow_range():
    store = HashStore(_records())
    assert store.search_range(-(10**9), 10**9) == store.search_range(1, 5)


def test_duplicate_id_keeps_last():
    store = HashStore([KTP(1, "Ani Halim", "x"), KTP(1, "Budi Santoso", "y")])
    assert len(store) == 1
    assert store.search(1).name == "Budi Santoso"


def test_update_changes_record():
    store = HashStore(_records())
    assert store.update(5, "Dewi Kusuma", "15-08-1995") is True
    assert store.search(5) == KTP(5, "Dewi Kusuma", "15-08-1995")


def test_update_missing_returns_false():
    store = HashStore(_records())
    assert store.update(42, "Dewi Kusuma", "15-08-1995") is False
    assert sorted(r.id for r in store.records()) == [1, 3, 5]


def test_update_does_not_touch_input_records():
    source = _records()
    store = HashStore(source)
    store.update(1, "Changed", "01-01-2001")
    assert source[1].name == "Ani Halim"


def test_delete_removes_once():
    store = HashStore(_records())
    assert store.delete(3) is True
    assert store.search(3) is None
    assert store.delete(3) is False
    assert sorted(r.id for r in store.records()) == [1, 5]