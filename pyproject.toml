[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exerkit"
version = "0.1.0"
description = "Huffman text compression in two container formats, a binary search tree, primality tests and other small numeric and text helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "binary-search-tree", "primes", "miller-rabin", "fibonacci", "palindrome"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exerkit-basics = "exerkit.basics:main"
exerkit-bst = "exerkit.bst:main"
exerkit-huffman = "exerkit.huffman:main"
exerkit-treecodec = "exerkit.treecodec:main"

[tool.hatch.build.targets.wheel]
packages = ["exerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
