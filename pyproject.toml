[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ktpbench"
version = "0.1.0"
description = "Generate synthetic KTP identity records and time B+ tree and hash map stores over them"
requires-python = ">=3.10"
dependencies = []
keywords = ["b+tree", "hash map", "benchmark", "csv", "ktp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ktp-generate = "ktpbench.generate:main"
ktp-btree = "ktpbench.cli:btree_main"
ktp-hashmap = "ktpbench.cli:hashmap_main"

[tool.hatch.build.targets.wheel]
packages = ["ktpbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
