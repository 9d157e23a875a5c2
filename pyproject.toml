[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "markit"
version = "1.2.2"
description = "A terminal snippet manager."
requires-python = ">=3.10"
keywords = ["cli", "snippets", "shell", "bookmarks", "clipboard"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml>=6.0",
    "rich>=13.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
markit = "markit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["markit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
