"""Generation of random KTP records for benchmarking."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Sequence
from datetime import date

from ktpbench.records import KTP, StrPath

GENERATED_HEADER = "ID,Nama,Tanggal Lahir"
DEFAULT_OUTPUT = "KTPData.csv"

MALE_FIRST_NAMES = (
    "Ahmad", "Budi", "Cahyo", "Dedi", "Eko", "Fajar", "Gunawan", "Hadi", "Irfan", "Joko",
    "Kurniawan", "Lukman", "Mulyono", "Nugroho", "Oki", "Purnomo", "Rudi", "Surya", "Teguh",
    "Wahyu",
)

FEMALE_FIRST_NAMES = (
    "Ani", "Bunga", "Citra", "Dewi", "Eka", "Fitri", "Gita", "Hani", "Intan", "Juli",
    "Kartika", "Lina", "Maya", "Nur", "Oki", "Putri", "Rini", "Sari", "Tuti", "Wulan",
)

LAST_NAMES = (
    "Santoso", "Wijaya", "Prabowo", "Hidayat", "Siregar", "Tanuwijaya", "Kusuma", "Setiawan",
    "Pratama", "Halim", "Susanto", "Wibowo", "Siregar", "Gunawan", "Saputra", "Irawan",
)

MIN_AGE = 17
MAX_AGE = 70


def generate_name(rng: random.Random) -> str:
    """Return a random ``First Last`` name of a random gender."""
    first_names = MALE_FIRST_NAMES if rng.randint(0, 1) else FEMALE_FIRST_NAMES
    return f"{rng.choice(first_names)} {rng.choice(LAST_NAMES)}"


def generate_birth_date(rng: random.Random, today: date | None = None) -> str:
    """Return a ``DD-MM-YYYY`` birth date for an age between 17 and 70."""
    if today is None:
        today = date.today()
    age = rng.randint(MIN_AGE, MAX_AGE)
    day = rng.randint(1, 28)
    month = rng.randint(1, 12)
    return f"{day:02d}-{month:02d}-{today.year - age}"


def generate_ktp_data(amount: int, rng: random.Random) -> list[KTP]:
    """Return ``amount`` records with IDs ``0..amount-1`` in shuffled order."""
    today = date.today()
    records = [
        KTP(i, generate_name(rng), generate_birth_date(rng, today)) for i in range(amount)
    ]
    rng.shuffle(records)
    return records


def write_generated_csv(path: StrPath, records: Iterable[KTP]) -> None:
    """Write generated records to a CSV file."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(GENERATED_HEADER + "\n")
        for record in records:
            handle.write(f"{record.id},{record.name},{record.birth_date}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Generate random records and save them as CSV."""
    parser = argparse.ArgumentParser(description="Generate random KTP records.")
    parser.add_argument("amount", nargs="?", type=int, help="number of records")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="CSV file to write")
    args = parser.parse_args(argv)

    amount = args.amount
    if amount is None:
        try:
            amount = int(input("Masukkan jumlah data KTP yang ingin dibuat: "))
        except (ValueError, EOFError):
            print("Jumlah data tidak valid.", file=sys.stderr)
            return 1

    records = generate_ktp_data(amount, random.Random())
    write_generated_csv(args.output, records)
    print(f"Data berhasil disimpan ke {args.output}!")
    return 0


if __name__ == "__main__":
    sys.exit(main())