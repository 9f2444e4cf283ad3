[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zenops"
version = "0.12.0"
description = "Building blocks for declarative dotfile and shell configuration management: git status parsing, line prompts, bootstrap config rendering and typed errors."
requires-python = ">=3.10"
dependencies = []
keywords = ["dotfiles", "config", "shell", "system", "git"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zenops"]

[tool.pytest.ini_options]
addopts = "-ra"
