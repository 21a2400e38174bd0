[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foxtive"
version = "0.1.0"
description = "Application building blocks: app messages, environments, pluggable caches, pagination helpers, string enums and an asyncio cron scheduler."
requires-python = ">=3.10"
dependencies = []
keywords = ["framework", "cache", "cron", "scheduler", "pagination", "environment", "asyncio", "enum"]
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["foxtive"]

[tool.hatch.build.targets.sdist]
include = ["foxtive", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
