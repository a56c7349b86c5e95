[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serialtui"
version = "0.1.0"
description = "A full-screen terminal program for watching and talking to serial ports"
requires-python = ">=3.10"
keywords = ["serial", "terminal", "tui", "uart", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Serial",
]
dependencies = [
    "pyserial",
    "prompt-toolkit",
    "platformdirs",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
serialtui = "serialtui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["serialtui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
