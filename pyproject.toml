[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stacksort"
version = "0.1.0"
description = "Sort integers with two stacks and a small instruction set, plus string, formatting and line-reading helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["push-swap", "sorting", "stacks", "printf", "string-utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
push-swap = "stacksort.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stacksort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
