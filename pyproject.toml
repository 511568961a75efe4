[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webnook"
version = "0.1.0"
description = "An HTML builder with string, encoding, Unicode, file and network helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "builder", "base64", "utf-8", "url-escape", "ip-address", "sockets"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["webnook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
