[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zewif"
version = "0.1.0"
description = "Core data types for the Zcash Wallet Interchange Format: amounts, heights, hashes, blobs and binary parsing"
requires-python = ">=3.10"
keywords = ["zcash", "wallet", "interchange", "cbor", "binary", "parsing"]
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
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cbor2>=5.4",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "hypothesis>=6",
]

[tool.hatch.build.targets.wheel]
packages = ["zewif"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
