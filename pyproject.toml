[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nelmead"
version = "0.1.0"
description = "Nelder-Mead simplex minimisation of functions given as text expressions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "nelder-mead",
    "optimization",
    "simplex",
    "minimization",
    "expression-parser",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nelmead = "nelmead.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nelmead"]

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
