[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jambojet"
version = "0.1.0"
description = "A small airline booking interface: flight search, boarding passes and a loyalty card, modelled as a widget tree."
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "widgets", "flights", "booking", "boarding-pass"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jambojet = "jambojet.app:main"

[tool.hatch.build.targets.wheel]
packages = ["jambojet"]

[tool.pytest.ini_options]
addopts = "-ra"
