[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmpcollector"
version = "0.1.0"
description = "Records, group matching, topic selection, partitioning and message headers for a BGP Monitoring Protocol collector's message bus"
requires-python = ">=3.10"
dependencies = []
keywords = ["bgp", "bmp", "bgp-ls", "evpn", "l3vpn", "monitoring", "message-bus", "topics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bmpcollector"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
