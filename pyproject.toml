[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iavlproof"
version = "0.1.0"
description = "Proof node hashing, proof paths, commitment-proof operations and merged iteration for versioned IAVL Merkle trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["iavl", "merkle", "avl", "proof", "ics23", "commitment"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iavlproof"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
