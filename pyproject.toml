[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miraicore"
version = "0.1.0"
description = "Building blocks for a QQ messaging client: message elements, topic feeds, TLV encoders, dynamic protobuf encoding and utilities"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["qq", "chat", "tlv", "protobuf", "messaging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["miraicore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
