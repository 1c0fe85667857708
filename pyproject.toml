[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "feemarket"
version = "0.1.0"
description = "EIP-1559 style fee market with an AIMD adjustable learning rate, genesis handling and fee/tip payout"
requires-python = ">=3.10"
dependencies = []
keywords = ["eip-1559", "fee market", "gas price", "aimd", "blockchain"]
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
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["feemarket"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
