import random
import re
from datetime import date

import pytest

from ktpbench.generate import (
    FEMALE_FIRST_NAMES,
    GENERATED_HEADER,
    LAST_NAMES,
    MALE_FIRST_NAMES,
    generate_birth_date,
    generate_ktp_data,
    generate_name,
    main,
    write_generated_csv,
)
from ktpbench.records import read_ktp_data


@pytest.mark.parametrize("seed", range(20))
def test_generate_name_uses_known_names(seed):
    first, last = generate_name(random.Random(seed)).split(" ")
    assert first in MALE_FIRST_NAMES + FEMALE_FIRST_NAMES
    assert last in LAST_NAMES


@pytest.mark.parametrize("seed", range(20))
def test_birth_date_format_and_age(seed):
    today = date(2024, 6, 1)
    text = generate_birth_date(random.Random(seed), today)
    match = re.fullmatch(r"(\d{2})-(\d{2})-(\d{4})", text)
    assert match
    day, month, year = (int(g) for g in match.groups())
    assert 1 <= day <= 28
    assert 1 <= month <= 12
    assert today.year - 70 <= year <= today.year - 17


def test_generate_ktp_data_ids_are_a_permutation():
    records = generate_ktp_data(50, random.Random(7))
    assert sorted(r.id for r in records) == list(range(50))


def test_generate_ktp_data_is_deterministic_per_seed():
    first = generate_ktp_data(10, random.Random(3))
    second = generate_ktp_data(10, random.Random(3))
    assert first == second


def test_generate_ktp_data_non_positive_amount():
    assert generate_ktp_data(0, random.Random(1)) == []
    assert generate_ktp_data(-5, random.Random(1)) == []


def test_write_generated_csv_round_trip(tmp_path):
    path = tmp_path / "out.csv"
    records = generate_ktp_data(12, random.Random(11))
    write_generated_csv(path, records)
    assert path.read_text(encoding="utf-8").splitlines()[0] == GENERATED_HEADER
    assert read_ktp_data(path, 100) == records


def test_main_with_argument(tmp_path, capsys):
    path = tmp_path / "data.csv"
    assert main(["5", "--output", str(path)]) == 0
    assert len(read_ktp_data(path, 100)) == 5
    assert f"Data berhasil disimpan ke {path}!" in capsys.readouterr().out


def test_main_prompts_for_amount(tmp_path, monkeypatch):
    import io

    path = tmp_path / "data.csv"
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    assert main(["--output", str(path)]) == 0
    assert sorted(r.id for r in read_ktp_data(path, 100)) == [0, 1, 2, 3]


def test_main_rejects_bad_amount(tmp_path, monkeypatch):
    import io

    path = tmp_path / "data.csv"
    monkeypatch.setattr("sys.stdin", io.StringIO("many\n"))
    assert main(["--output", str(path)]) == 1
    assert not path.exists()