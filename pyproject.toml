[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodemos"
version = "0.1.0"
description = "Interactive demonstrations of classic searching and sorting algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "binary search",
    "interpolation search",
    "merge sort",
    "selection sort",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
algodemos-binary-search = "algodemos.binary_search:main"
algodemos-interpolation = "algodemos.interpolation:main"
algodemos-merge-sort = "algodemos.merge_sort:main"
algodemos-selection-sort = "algodemos.selection_sort:main"

[tool.hatch.build.targets.wheel]
packages = ["algodemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
