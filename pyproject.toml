[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainreaxian"
version = "0.1.0"
description = "A small space-invaders style arcade game in which burning aliens set off chain reactions."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "arcade", "shooter", "pygame", "invaders"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chainreaxian = "chainreaxian.app:main"

[tool.hatch.build.targets.wheel]
packages = ["chainreaxian"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
