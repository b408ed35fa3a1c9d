[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strintern"
version = "0.1.0"
description = "A compact string interning repository with stable integer IDs, snapshots and frequency-based reordering"
requires-python = ">=3.10"
dependencies = []
keywords = ["intern", "interning", "strings", "symbol table", "string pool"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
strintern-benchmark = "strintern.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["strintern"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
