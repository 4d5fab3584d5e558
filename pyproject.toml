[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uint256kit"
version = "0.1.0"
description = "Fixed-width 256-bit unsigned integer arithmetic with modular and Montgomery operations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "uint256",
    "bignum",
    "modular arithmetic",
    "montgomery",
    "gcd",
    "modular inverse",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
uint256kit-bench = "uint256kit.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["uint256kit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
