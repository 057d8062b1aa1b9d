[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dilithcore"
version = "0.1.0"
description = "Building blocks of the Dilithium signature scheme: parameters, Keccak/SHAKE, NTT, hint packing and the KAT deterministic RNG"
requires-python = ">=3.10"
keywords = ["dilithium", "ml-dsa", "post-quantum", "keccak", "shake", "sha3", "ntt", "lattice", "kat", "drbg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dilithcore"]

[tool.pytest.ini_options]
addopts = "-ra"
