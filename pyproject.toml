[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "potprobe"
version = "0.1.0"
description = "Probe an SSH service with a series of network checks and estimate how likely it is to be a honeypot"
requires-python = ">=3.10"
dependencies = []
keywords = ["ssh", "honeypot", "detection", "network", "security", "probe"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Information Technology",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
potprobe = "potprobe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["potprobe"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
