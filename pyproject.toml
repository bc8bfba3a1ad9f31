[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "themekit"
version = "0.0.3"
description = "Light, dark, system and custom colour themes with a stateful theme provider, persistence and previews."
requires-python = ">=3.10"
keywords = ["theme", "dark-mode", "colors", "ui", "theming"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["themekit"]

[tool.pytest.ini_options]
addopts = "-ra"
