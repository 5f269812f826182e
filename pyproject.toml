[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "merkchain"
version = "0.1.0"
description = "A small hash-linked chain of blocks whose transactions are summarised by a SHA-256 Merkle root"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "merkle", "merkle-tree", "sha256", "hash-chain"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
merkchain = "merkchain.cli:main"
merkchain-merkle = "merkchain.cli:merkle_example"

[tool.hatch.build.targets.wheel]
packages = ["merkchain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
