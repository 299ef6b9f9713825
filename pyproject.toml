[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplesched"
version = "0.1.0"
description = "A small interactive shell with a time-sliced, priority-aware process scheduler"
requires-python = ">=3.10"
keywords = ["scheduler", "shell", "round-robin", "priority", "processes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simplesched = "simplesched.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["simplesched"]

[tool.pytest.ini_options]
addopts = "-ra"
