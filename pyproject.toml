[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "semagroup"
version = "0.1.0"
description = "A wait group with an optional concurrency limit for threaded Python code"
requires-python = ">=3.10"
dependencies = []
keywords = ["semaphore", "wait group", "concurrency", "threading", "synchronization"]
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
]

[project.optional-dependencies]
test = ["pytest", "pytest-timeout"]

[project.scripts]
semagroup-examples = "semagroup.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["semagroup"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
