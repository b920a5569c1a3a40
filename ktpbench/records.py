"""KTP (identity card) records and their CSV storage."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from typing import Union

logger = logging.getLogger(__name__)

CSV_HEADER = "ID,Nama,TanggalLahir"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

StrPath = Union[str, "PathLike[str]"]


@dataclass
class KTP:
    """A single identity-card record."""

    id: int
    name: str
    birth_date: str


def _parse_id(text: str) -> int:
    """Parse the leading integer of ``text`` as a 32-bit signed value."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_line(line: str) -> KTP | None:
    parts = line.split(",", 2)
    if len(parts) < 3 or parts[2] == "":
        return None
    id_text, name, birth_date = parts
    try:
        record_id = _parse_id(id_text)
    except ValueError:
        logger.warning("invalid ID format: %s", id_text)
        return None
    return KTP(record_id, name, birth_date)


def read_ktp_data(path: StrPath, limit: int) -> list[KTP]:
    """Read at most ``limit`` records from a CSV file, skipping its header.

    Lines without three fields are ignored; lines whose ID is not a valid
    integer are logged and ignored. Raises ``OSError`` if the file cannot
    be opened.
    """
    records: list[KTP] = []
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for raw in handle:
            if len(records) >= limit:
                break
            record = _parse_line(raw.rstrip("\n"))
            if record is not None:
                records.append(record)
    return records


def write_ktp_csv(path: StrPath, records: Iterable[KTP]) -> None:
    """Write records to a CSV file with the standard header."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(CSV_HEADER + "\n")
        for record in records:
            handle.write(f"{record.id},{record.name},{record.birth_date}\n")


def format_record(record: KTP) -> str:
    """Render a record for display as ``ID, Name, BirthDate``."""
    return f"{record.id}, {record.name}, {record.birth_date}"