[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data structures and algorithms with small interactive consoles: AVL, BST, threaded trees, heap sort, Kruskal, Prim, Bloom, cuckoo and count-min."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "avl",
    "bst",
    "threaded binary tree",
    "heap sort",
    "kruskal",
    "prim",
    "bloom filter",
    "cuckoo hashing",
    "count-min sketch",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsakit-avl = "dsakit.avl:main"
dsakit-bst = "dsakit.bst:main"
dsakit-heap = "dsakit.heap:main"
dsakit-kruskal = "dsakit.kruskal:main"
dsakit-countmin = "dsakit.countmin:main"
dsakit-prims = "dsakit.prims:main"
dsakit-threaded = "dsakit.threaded:main"
dsakit-filters = "dsakit.filters:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
