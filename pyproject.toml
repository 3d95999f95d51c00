[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "objdata"
version = "0.1.0"
description = "Asset, project and reference data types with storage keys and encrypted catalog entries"
requires-python = ">=3.10"
keywords = ["assets", "projects", "references", "xchacha20-poly1305", "protobuf", "content-addressing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = [
    "pycryptodome>=3.19",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "hypothesis>=6.80",
]

[tool.hatch.build.targets.wheel]
packages = ["objdata"]

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
