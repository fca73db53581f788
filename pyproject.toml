[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gepetto"
version = "0.1.0"
description = "Scaffold new Pinocchio-based Solana program projects from a template directory"
requires-python = ">=3.10"
keywords = ["solana", "pinocchio", "scaffold", "template", "project-generator"]
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
    "Topic :: Software Development :: Code Generators",
]
dependencies = [
    "click>=8.1",
    "jinja2>=3.1",
    "cryptography>=41.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
]

[project.scripts]
gepetto = "gepetto.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gepetto"]

[tool.pytest.ini_options]
addopts = "-ra"
