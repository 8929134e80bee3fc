[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "menustructs"
version = "0.1.0"
description = "Bounded and linked queues, a linked stack and a singly linked list, with interactive menu programs"
requires-python = ">=3.10"
dependencies = []
keywords = ["queue", "stack", "linked list", "circular queue", "data structures", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
menustructs = "menustructs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["menustructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
