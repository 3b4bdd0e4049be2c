[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libmykit"
version = "0.1.0"
description = "A small toolkit of text, math, list, file, error-message and printf-style formatting helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "printf", "linked-list", "utilities", "formatting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
libmykit = "libmykit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["libmykit"]

[tool.pytest.ini_options]
addopts = "-ra"
