[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "perfkit"
version = "0.1.0"
description = "Arbitrary-precision integers, a pebble simulation and small performance-minded utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bigint",
    "arbitrary-precision",
    "karatsuba",
    "algorithms",
    "hashing",
    "simulation",
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
perfkit-bigint = "perfkit.bigmath:main"
perfkit-pebbles = "perfkit.pebbles:main"

[tool.hatch.build.targets.wheel]
packages = ["perfkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
