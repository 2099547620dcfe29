[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lanternhttp"
version = "1.0.0"
description = "Building blocks for small HTTP servers: requests, responses, content negotiation, compression, configuration, logging and rate limiting"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "content-negotiation", "compression", "rate-limiting", "logging", "thread-pool"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lanternhttp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
