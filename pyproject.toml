[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcpfighter"
version = "0.1.0"
description = "Building blocks for a sector-based TCP fighting game server: ring buffers, packets, pools, logging, profiling and player logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["game-server", "mmo", "ring-buffer", "packet", "sector", "profiling"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tcpfighter-logfilter = "tcpfighter.logfilter:main"

[tool.hatch.build.targets.wheel]
packages = ["tcpfighter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
