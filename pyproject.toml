[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xxr"
version = "0.1.0"
description = "Learning classifier system building blocks: XCS/XCSR classifiers, genetic operators and benchmark environments"
requires-python = ">=3.10"
dependencies = []
keywords = ["xcs", "xcsr", "learning classifier system", "genetic algorithm", "reinforcement learning", "multiplexer", "checkerboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xxr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
