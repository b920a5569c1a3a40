# ktpbench

ktpbench writes a CSV file of synthetic KTP (Indonesian identity card) records. It then loads
that file into one of two in-memory stores and times each of the usual operations on it. The
prompts and reports are in Indonesian.

The two stores are:

- `BPlusTree` (in `ktpbench.bptree`), a balanced search tree with a configurable minimum
  degree. The commands use a degree of 20.
- `HashStore` (in `ktpbench.hashstore`), a dictionary keyed by record ID.

## Installation

```
pip install .
```

## Generating data

```
ktp-generate [AMOUNT] [--output FILE]
```

If `AMOUNT` is not given, the command asks for it. Records are written to `FILE`, which
defaults to `KTPData.csv` in the current directory, under the header `ID,Nama,Tanggal Lahir`.

Each record has three fields:

- an integer ID from `0` to `AMOUNT - 1`, with the rows in shuffled order;
- a random name, a first name followed by a last name;
- a birth date in `DD-MM-YYYY` form. The day is between 1 and 28, and the year gives an age
  between 17 and 70 in the current year.

## Running a session

```
ktp-btree   [--file FILE] [--limit N] [--degree D]
ktp-hashmap [--file FILE] [--limit N]
```

Both commands read up to `N` records from `FILE`. The defaults are 1,000,000 records from
`KTPData.csv`. The first line of the file is skipped as a header. Lines with fewer than three
comma-separated fields are ignored. Lines whose ID is not a 32-bit integer are logged and
ignored. If the file cannot be opened, the session runs with no records.

Each command reports how long it took to build its store, then reads from standard input, in
this order:

1. an ID to look up;
2. a start ID and an end ID for a range search, which reports the number of hits and the
   average time per hit;
3. an ID to update, followed by a new name and a new birth date, each on its own line;
4. an ID to delete.

Each step reports its elapsed time in nanoseconds. A successful update or delete writes the
store's records back to `FILE` under the header `ID,Nama,TanggalLahir`. The command exits with
status 1 if input runs out or an integer was expected and not given.

`python -m ktpbench.cli` runs the B+ tree session.

## Library use

```python
from ktpbench.records import KTP, read_ktp_data, write_ktp_csv, format_record
from ktpbench.bptree import BPlusTree
from ktpbench.hashstore import HashStore

records = read_ktp_data("KTPData.csv", 1000)

tree = BPlusTree(20)
for record in records:
    tree.insert(record)

found = tree.search(42)               # KTP or None
in_range = tree.search_range(10, 20)  # list ordered by ID
tree.update(42, "Budi Santoso", "01-02-1990")  # True if found
tree.delete(42)                       # True if removed
write_ktp_csv("KTPData.csv", tree.records())

store = HashStore(records)            # stores copies; a later duplicate ID wins
print(format_record(store.search(7)))
```

`ktpbench.generate` provides `generate_name`, `generate_birth_date`, `generate_ktp_data` and
`write_generated_csv`. Each of the first three takes a `random.Random`, so results can be
reproduced.

`ktpbench.cli.run_session` runs the interactive session on any store. It takes a function
that builds the store, a label, a file path, an iterable of input lines and an output stream.

## Limitations

- `BPlusTree` keeps some records in its internal nodes. `BPlusTree.delete` removes only
  records held in leaves and never rebalances the tree. `BPlusTree.records()` returns only
  leaf records, so a file saved from the tree leaves out records held in internal nodes.
- `BPlusTree.insert` keeps duplicate IDs. `HashStore` keeps only the last record for each ID.
- `HashStore.records()` and the files saved from it follow insertion order, not ID order.
- All data lives in memory. The CSV file is the only storage, and it is rewritten in full on
  each save.
- Fields are split on commas with no quoting, so names must not contain commas.

## Tests

```
pip install .[test]
pytest
```