[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpccompat"
version = "0.1.0"
description = "Validators that check Solana JSON-RPC results against expected shapes and values"
requires-python = ">=3.10"
dependencies = []
keywords = ["solana", "json-rpc", "compatibility", "validation", "testing"]
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
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rpccompat"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
