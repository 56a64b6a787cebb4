[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagc"
version = "0.1.0"
description = "Binary-field elements, bit and field vectors, and VOLE-in-the-head bookkeeping for publicly auditable garbled-circuit two-party computation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "garbled circuits",
    "vole",
    "voleith",
    "secure computation",
    "binary fields",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["pagc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
