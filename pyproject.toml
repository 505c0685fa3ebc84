[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smallsh"
version = "1.0.0"
description = "A small interactive POSIX shell with built-ins, I/O redirection, background jobs and a foreground-only mode"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "job-control", "posix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smallsh = "smallsh.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["smallsh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
