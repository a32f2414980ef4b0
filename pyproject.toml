[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ethlibs"
version = "0.1.0"
description = "Typed Ethereum JSON-RPC values: hex data, addresses, quantities, block specifiers, logs, filters, blooms and secp256k1 signatures"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = [
    "ethereum",
    "json-rpc",
    "rlp",
    "keccak",
    "eip-55",
    "eip-155",
    "eip-1898",
    "eip-2930",
    "eip-7702",
    "bloom",
    "secp256k1",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ethlibs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
