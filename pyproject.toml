[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eorzeos"
version = "0.1.0"
description = "A playful command shell running on a simulated 80x25 text-mode screen"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "emulator", "text-mode", "toy-os", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eorzeos = "eorzeos.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["eorzeos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
