"""A balanced search tree of KTP records keyed by ID."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from dataclasses import dataclass, field
from operator import attrgetter

from ktpbench.records import KTP

_record_id = attrgetter("id")


@dataclass
class _Node:
    leaf: bool
    records: list[KTP] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)


class BPlusTree:
    """Tree of minimum degree ``degree`` holding KTP records ordered by ID."""

    def __init__(self, degree: int) -> None:
        if degree < 2:
            raise ValueError(f"degree must be at least 2, got {degree}")
        self.degree = degree
        self._root = _Node(leaf=True)

    @property
    def _max_records(self) -> int:
        return 2 * self.degree - 1

    def _split_child(self, parent: _Node, index: int, child: _Node) -> None:
        t = self.degree
        sibling = _Node(leaf=child.leaf, records=child.records[t:])
        if not child.leaf:
            sibling.children = child.children[t:]
        parent.children.insert(index + 1, sibling)
        parent.records.insert(index, child.records[t - 1])
        child.records = child.records[: t - 1]
        if not child.leaf:
            child.children = child.children[:t]

    def insert(self, record: KTP) -> None:
        """Insert a record; duplicate IDs are kept."""
        if len(self._root.records) == self._max_records:
            new_root = _Node(leaf=False, children=[self._root])
            self._split_child(new_root, 0, self._root)
            self._root = new_root
        node = self._root
        while not node.leaf:
            i = bisect_right(node.records, record.id, key=_record_id)
            if len(node.children[i].records) == self._max_records:
                self._split_child(node, i, node.children[i])
                if record.id > node.records[i].id:
                    i += 1
            node = node.children[i]
        i = bisect_right(node.records, record.id, key=_record_id)
        node.records.insert(i, record)

    def search(self, id_: int) -> KTP | None:
        """Return the record with the given ID, or ``None``."""
        node = self._root
        while True:
            i = bisect_left(node.records, id_, key=_record_id)
            if i < len(node.records) and node.records[i].id == id_:
                return node.records[i]
            if node.leaf:
                return None
            node = node.children[i]

    def _walk_range(self, node: _Node, start_id: int, end_id: int) -> Iterator[KTP]:
        if node.leaf:
            yield from (r for r in node.records if start_id <= r.id <= end_id)
            return
        for child, record in zip(node.children, node.records):
            yield from self._walk_range(child, start_id, end_id)
            if start_id <= record.id <= end_id:
                yield record
        yield from self._walk_range(node.children[-1], start_id, end_id)

    def search_range(self, start_id: int, end_id: int) -> list[KTP]:
        """Return all records with ``start_id <= id <= end_id`` in ID order."""
        return list(self._walk_range(self._root, start_id, end_id))

    def update(self, id_: int, name: str, birth_date: str) -> bool:
        """Change name and birth date of the record with ``id_``.

        Returns whether such a record was found.
        """
        record = self.search(id_)
        if record is None:
            return False
        record.name = name
        record.birth_date = birth_date
        return True

    def delete(self, id_: int) -> bool:
        """Remove the record with ``id_`` from the leaf it routes to.

        Only records held in leaf nodes can be removed; returns whether one
        was removed.
        """
        node = self._root
        while not node.leaf:
            i = bisect_left(node.records, id_, key=_record_id)
            node = node.children[i]
        for i, record in enumerate(node.records):
            if record.id == id_:
                del node.records[i]
                return True
        return False

    def _leaf_records(self, node: _Node) -> Iterator[KTP]:
        if node.leaf:
            yield from node.records
        else:
            for child in node.children:
                yield from self._leaf_records(child)

    def records(self) -> list[KTP]:
        """Return the records held in leaf nodes, in ID order."""
        return list(self._leaf_records(self._root))