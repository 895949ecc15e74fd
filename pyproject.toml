[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "petlist"
version = "0.1.0"
description = "A singly linked list with index-based operations, plus a small pet register built on it"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "data structures", "collections", "pets"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
petlist-demo = "petlist.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["petlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
