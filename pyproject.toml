[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mtcenter"
version = "0.1.0"
description = "Interactive command shell with namespaced commands for modules, sessions, security, data and telephony"
requires-python = ">=3.10"
keywords = ["cli", "shell", "repl", "command-center", "command-router"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mtcenter = "mtcenter.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["mtcenter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
