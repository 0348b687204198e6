[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ustrkit"
version = "0.1.0"
description = "Codepoint-aware UTF-8 string and string-list utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["utf-8", "unicode", "codepoint", "string", "split", "join"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ustrkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
