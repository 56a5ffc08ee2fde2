[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xaesgcm"
version = "0.1.0"
description = "XAES-256-GCM authenticated encryption with extended 192-bit nonces"
requires-python = ">=3.10"
keywords = ["aead", "aes", "gcm", "xaes-256-gcm", "encryption", "cryptography"]
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
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["xaesgcm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
