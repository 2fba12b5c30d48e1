[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "girderworks"
version = "0.1.0"
description = "A component-based engine for a girder-climbing, barrel-dodging arcade platformer"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "platformer", "components", "pygame"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["girderworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
