[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phfmap"
version = "1.0.0"
description = "Read-only, order-preserving maps and sets backed by perfect hash functions (CHD algorithm)"
requires-python = ">=3.10"
dependencies = []
keywords = ["phf", "perfect-hash", "chd", "siphash", "ordered-map", "ordered-set"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["phfmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
