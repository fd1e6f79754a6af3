[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minnow"
version = "0.1.0"
description = "A bounded in-memory byte stream, plus small TCP and HTTP command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "byte stream", "networking", "sockets", "netcat", "http"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minnow-tcp-native = "minnow.tcp_native:main"
minnow-webget = "minnow.webget:main"

[tool.hatch.build.targets.wheel]
packages = ["minnow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
