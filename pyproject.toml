[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uarsim"
version = "0.1.0"
description = "Closed-loop control simulation: ARX plant, PID controller with anti-windup and setpoint generator"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "control",
    "pid",
    "arx",
    "simulation",
    "anti-windup",
    "setpoint",
    "feedback",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
uarsim = "uarsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["uarsim"]

[tool.hatch.build.targets.sdist]
include = ["uarsim", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
