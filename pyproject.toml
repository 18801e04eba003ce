[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptolab"
version = "0.1.0"
description = "Classroom cryptography toolkit: AES-128 in CBC mode, a Caesar cipher and letter-frequency analysis"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "cbc", "caesar", "cipher", "frequency analysis", "cryptanalysis", "pkcs7"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cryptolab-aes = "cryptolab.aes_demo:main"
cryptolab-caesar = "cryptolab.caesar:main"
cryptolab-frequency = "cryptolab.frequency:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
