[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algostudy"
version = "0.1.0"
description = "Classic data structures and algorithms: search trees, caches, sorting, linked lists, binary trees and dynamic programming."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "binary-search-tree",
    "avl-tree",
    "priority-queue",
    "lru-cache",
    "lfu-cache",
    "sorting",
    "linked-list",
    "dynamic-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
algostudy-bst = "algostudy.bst_tree:main"
algostudy-avl = "algostudy.avl:main"
algostudy-search-tree = "algostudy.binary_search_tree:main"

[tool.hatch.build.targets.wheel]
packages = ["algostudy"]

[tool.hatch.build.targets.sdist]
include = ["algostudy", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
