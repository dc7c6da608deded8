[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jitcli"
version = "0.0.1"
description = "A Jira experience like git: focus ticket work like branches"
requires-python = ">=3.10"
keywords = ["jira", "cli", "tickets", "tasks", "workflow"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Bug Tracking",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
jit = "jitcli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jitcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
