[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "peerwire"
version = "0.1.0"
description = "Peer identities, dial-able addresses, request/response types and route-based dispatch for peer-to-peer services"
requires-python = ">=3.10"
dependencies = []
keywords = ["p2p", "networking", "routing", "request", "response", "peer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["peerwire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
