[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "expertsys"
version = "0.1.0"
description = "Terminal workspace for writing expert-system rules and facts"
requires-python = ">=3.10"
keywords = ["expert-system", "rules", "facts", "tui", "terminal", "urwid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "urwid",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
expertsys = "expertsys.app:main"

[tool.hatch.build.targets.wheel]
packages = ["expertsys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
