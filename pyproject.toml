[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datakit"
version = "0.1.0"
description = "Small data-handling toolkit: linked lists, byte stacks, IEEE 754 field access, hex dumps, bitmap and WAVE headers and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked-list", "stack", "ieee754", "endian", "hexdump", "bitmap", "wave"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["datakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
