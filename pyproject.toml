[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crhtml"
version = "0.1.0"
description = "Parse a plain-text comprehensive rules document into sections, subsections and rules, and render it as static HTML pages."
requires-python = ">=3.10"
dependencies = []
keywords = ["rules", "rulebook", "parser", "html", "static-site"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: HTML",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crhtml = "crhtml.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["crhtml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
