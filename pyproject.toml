[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ugkit"
version = "0.1.0"
description = "Small concurrency containers, a thread pool, a counting sorted container and a base64 command-line tool"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ring buffer",
    "spin lock",
    "thread pool",
    "queue",
    "concurrency",
    "sorted container",
    "base64",
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ugkit-base64 = "ugkit.base64_tool:main"

[tool.hatch.build.targets.wheel]
packages = ["ugkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
