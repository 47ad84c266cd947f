[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpr"
version = "1.11.1"
description = "Building blocks for HTTP requests: URLs, headers, parameters, cookies, authentication, callbacks and async results"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "requests", "url", "cookies", "headers", "async"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cpr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
