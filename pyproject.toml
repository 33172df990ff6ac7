[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitcp"
version = "0.1.0"
description = "A small TCP endpoint: wrapping sequence numbers, byte streams, reassembly, sender and receiver."
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "networking", "reassembler", "byte-stream", "sequence-numbers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["minitcp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
