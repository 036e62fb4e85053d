[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslab"
version = "0.1.0"
description = "Classic data structures and small simulations: linked lists, a stack, a binary search tree, cache replacement, merge sort, CPU scheduling and a restaurant billing counter."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "linked-list",
    "binary-search-tree",
    "stack",
    "cache",
    "merge-sort",
    "cpu-scheduling",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslab-list-shell = "dslab.list_shell:main"
dslab-bst = "dslab.bst:main"
dslab-cache = "dslab.cache:main"
dslab-mergesort = "dslab.sorting:main"
dslab-scheduler = "dslab.scheduler_cli:main"
dslab-restaurant = "dslab.restaurant:main"

[tool.hatch.build.targets.wheel]
packages = ["dslab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
