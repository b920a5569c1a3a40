"""Interactive benchmark sessions over the tree and hash stores."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from time import perf_counter_ns
from typing import Protocol, TextIO

from ktpbench.bptree import BPlusTree
from ktpbench.hashstore import HashStore
from ktpbench.records import KTP, StrPath, format_record, read_ktp_data, write_ktp_csv

DEFAULT_FILE = "KTPData.csv"
DEFAULT_LIMIT = 1_000_000
DEFAULT_DEGREE = 20

_INTEGER = re.compile(r"[+-]?[0-9]+")


class _Store(Protocol):
    def search(self, id_: int) -> KTP | None: ...

    def search_range(self, start_id: int, end_id: int) -> list[KTP]: ...

    def update(self, id_: int, name: str, birth_date: str) -> bool: ...

    def delete(self, id_: int) -> bool: ...

    def records(self) -> list[KTP]: ...


class _Reader:
    """Reads whitespace-separated integers and whole lines from text lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._buffer = ""

    def _fill(self) -> bool:
        line = next(self._lines, None)
        if line is None:
            return False
        self._buffer += line if line.endswith("\n") else line + "\n"
        return True

    def read_int(self) -> int:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                break
            self._buffer = ""
            if not self._fill():
                raise EOFError("unexpected end of input")
        match = _INTEGER.match(stripped)
        if match is None:
            raise ValueError(f"expected an integer, got {stripped.split()[0]!r}")
        self._buffer = stripped[match.end():]
        return int(match.group())

    def ignore(self) -> None:
        if not self._buffer and not self._fill():
            return
        self._buffer = self._buffer[1:]

    def read_line(self) -> str:
        if not self._buffer and not self._fill():
            raise EOFError("unexpected end of input")
        line, _, self._buffer = self._buffer.partition("\n")
        return line


def _prompt(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def run_session(
    store: Callable[[], _Store],
    label: str,
    path: StrPath,
    lines: Iterable[str],
    out: TextIO,
) -> _Store:
    """Build a store with ``store()`` and run the timed interactive session.

    ``label`` names the structure in the report; changes are saved to
    ``path``. Input is read from ``lines`` and the report written to ``out``.
    Returns the store. Raises ``EOFError`` when input runs out and
    ``ValueError`` when an integer was expected but not given.
    """
    reader = _Reader(lines)

    start = perf_counter_ns()
    structure = store()
    insert_ns = perf_counter_ns() - start
    out.write(f"\n1. Waktu Insertion ({label}): {insert_ns} nanodetik\n")

    _prompt(out, "2. Masukkan ID yang ingin dicari: ")
    search_id = reader.read_int()
    start = perf_counter_ns()
    found = structure.search(search_id)
    search_ns = perf_counter_ns() - start
    if found is not None:
        out.write(f"   Data ditemukan: {format_record(found)}\n")
    else:
        out.write(f"   Data dengan ID {search_id} tidak ditemukan.\n")
    out.write(f"   Waktu pencarian: {search_ns} nanodetik\n")

    _prompt(out, "3. Masukkan rentang ID yang ingin dicari:\n   Start ID: ")
    start_id = reader.read_int()
    _prompt(out, "   End ID: ")
    end_id = reader.read_int()
    start = perf_counter_ns()
    hits = structure.search_range(start_id, end_id)
    range_ns = perf_counter_ns() - start
    average = range_ns // len(hits) if hits else 0
    out.write(
        f"   Waktu pencarian rentang ID [{start_id} - {end_id}]: {range_ns} nanodetik\n"
        f"   Jumlah data ditemukan: {len(hits)}\n"
        f"   Rata-rata waktu per item ditemukan: {average} nanodetik\n"
    )

    _prompt(out, "\n4. Masukkan ID yang ingin diupdate: ")
    update_id = reader.read_int()
    _prompt(out, "   Masukkan nama baru: ")
    reader.ignore()
    new_name = reader.read_line()
    _prompt(out, "   Masukkan tanggal lahir baru (DD-MM-YY): ")
    new_birth_date = reader.read_line()
    start = perf_counter_ns()
    updated = structure.update(update_id, new_name, new_birth_date)
    update_ns = perf_counter_ns() - start
    if updated:
        write_ktp_csv(path, structure.records())
        out.write("   Data berhasil diupdate dan disimpan ke file.\n")
        out.write(f"   Waktu update: {update_ns} nanodetik\n")
    else:
        out.write("   ID tidak ditemukan.\n")

    _prompt(out, "\n5. Masukkan ID yang ingin dihapus: ")
    delete_id = reader.read_int()
    start = perf_counter_ns()
    deleted = structure.delete(delete_id)
    delete_ns = perf_counter_ns() - start
    if deleted:
        write_ktp_csv(path, structure.records())
        out.write(
            f"   Data dengan ID {delete_id} berhasil dihapus dan disimpan ke file.\n"
        )
        out.write(f"   Waktu delete: {delete_ns} nanodetik\n")
    else:
        out.write(f"   Data dengan ID {delete_id} tidak ditemukan.\n")
    out.flush()
    return structure


def _parser(description: str, with_degree: bool) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--file", default=DEFAULT_FILE, help="CSV file of records")
    parser.add_argument(
        "--limit", type=int, default=DEFAULT_LIMIT, help="maximum records to read"
    )
    if with_degree:
        parser.add_argument(
            "--degree", type=int, default=DEFAULT_DEGREE, help="minimum tree degree"
        )
    return parser


def _load(path: str, limit: int) -> list[KTP]:
    try:
        records = read_ktp_data(path, limit)
    except OSError:
        print(f"Gagal membuka file {path}", file=sys.stderr)
        records = []
    print(f"\nSukses membaca {len(records)} data dari {path}")
    return records


def _run(store: Callable[[], _Store], label: str, path: str) -> int:
    try:
        run_session(store, label, path, sys.stdin, sys.stdout)
    except (EOFError, ValueError) as exc:
        print(f"Input tidak valid: {exc}", file=sys.stderr)
        return 1
    return 0


def btree_main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive benchmark on a B+ tree."""
    args = _parser("Benchmark KTP records in a B+ tree.", True).parse_args(argv)
    records = _load(args.file, args.limit)

    def build() -> BPlusTree:
        tree = BPlusTree(args.degree)
        for record in records:
            tree.insert(record)
        return tree

    return _run(build, "B+ Tree", args.file)


def hashmap_main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive benchmark on a hash map."""
    args = _parser("Benchmark KTP records in a hash map.", False).parse_args(argv)
    records = _load(args.file, args.limit)
    return _run(lambda: HashStore(records), "Hash Map", args.file)


if __name__ == "__main__":
    sys.exit(btree_main())