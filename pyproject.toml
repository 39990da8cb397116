[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unixtools"
version = "0.1.0"
description = "Small Unix-style command-line tools: reverse, cat, grep, run-length zip/unzip and a minimal shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["unix", "cat", "grep", "rle", "run-length", "shell", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reverse = "unixtools.reverse:main"
my-cat = "unixtools.cat:main"
my-grep = "unixtools.grep:main"
my-zip = "unixtools.rle:zip_main"
my-unzip = "unixtools.rle:unzip_main"
wish = "unixtools.wish:main"

[tool.hatch.build.targets.wheel]
packages = ["unixtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
