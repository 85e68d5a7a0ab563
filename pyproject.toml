[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "richsocket"
version = "0.1.0"
description = "WebSocket server that receives now-playing media metadata as JSON and notifies subscribers of each update"
requires-python = ">=3.10"
keywords = ["websocket", "media", "now-playing", "json", "asyncio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Internet",
]
dependencies = [
    "websockets",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
richsocket = "richsocket.app:main"

[tool.hatch.build.targets.wheel]
packages = ["richsocket"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
