[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kerndata"
version = "0.1.0"
description = "Bitmaps, flag sets, permission bits, and MBR/GPT partition table reading over block devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitmap", "bitset", "either", "permissions", "rflags", "mbr", "gpt", "partition", "block device"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kerndata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
