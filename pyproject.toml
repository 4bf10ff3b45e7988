[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uplink_ipc"
version = "0.1.0"
description = "In-process publish/subscribe transport for uProtocol-style messages with fixed-layout payloads"
requires-python = ">=3.10"
dependencies = []
keywords = ["ipc", "publish-subscribe", "transport", "messaging", "uprotocol"]
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
    "Topic :: System :: Distributed Computing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["uplink_ipc"]

[tool.pytest.ini_options]
addopts = "-ra"
