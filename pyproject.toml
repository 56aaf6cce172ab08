[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schoolnum"
version = "0.1.0"
description = "Elementary math functions, dense matrices and a 96-bit scaled decimal type in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "matrix", "determinant", "decimal", "fixed-point", "taylor-series"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["schoolnum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
