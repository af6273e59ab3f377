[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gochanlab"
version = "0.1.0"
description = "Thread-based concurrency building blocks and runnable demos: channels, rate limiters, contexts, worker pools and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["concurrency", "channels", "rate-limiting", "threading", "worker-pool", "context"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gochanlab = "gochanlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gochanlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
