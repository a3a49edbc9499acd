[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chbaselib"
version = "0.1.0"
description = "Small building blocks: text splitting, counters, bit flags, key input state, worker threads, rectangle sets and a lightweight JSON object model"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "bitflags", "rectangles", "text", "counter", "threads"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chbaselib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
