"""A hash-table store of KTP records keyed by ID."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from ktpbench.records import KTP


class HashStore:
    """Records held in a dictionary keyed by ID; a later duplicate ID wins."""

    def __init__(self, records: Iterable[KTP]) -> None:
        self._by_id: dict[int, KTP] = {record.id: replace(record) for record in records}

    def __len__(self) -> int:
        return len(self._by_id)

    def search(self, id_: int) -> KTP | None:
        """Return the record with the given ID, or ``None``."""
        return self._by_id.get(id_)

    def search_range(self, start_id: int, end_id: int) -> list[KTP]:
        """Return all records with ``start_id <= id <= end_id`` in ID order."""
        if end_id < start_id:
            return []
        if end_id - start_id + 1 > len(self._by_id):
            hits = [r for r in self._by_id.values() if start_id <= r.id <= end_id]
            return sorted(hits, key=lambda r: r.id)
        found = (self._by_id.get(i) for i in range(start_id, end_id + 1))
        return [record for record in found if record is not None]

    def update(self, id_: int, name: str, birth_date: str) -> bool:
        """Change name and birth date of the record with ``id_``.

        Returns whether such a record was found.
        """
        record = self._by_id.get(id_)
        if record is None:
            return False
        record.name = name
        record.birth_date = birth_date
        return True

    def delete(self, id_: int) -> bool:
        """Remove the record with ``id_``; returns whether one was removed."""
        return self._by_id.pop(id_, None) is not None

    def records(self) -> list[KTP]:
        """Return every stored record."""
        return list(self._by_id.values())