[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipeflow"
version = "1.0.0"
description = "Run shell-style command pipelines between an input file and an output file, with here-document support."
requires-python = ">=3.10"
dependencies = []
keywords = ["pipeline", "pipe", "shell", "here-document", "subprocess", "printf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pipeflow = "pipeflow.pipeline:main"

[tool.hatch.build.targets.wheel]
packages = ["pipeflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
