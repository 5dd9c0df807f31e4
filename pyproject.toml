[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sockdesc"
version = "0.1.0"
description = "Small object-oriented wrappers around IPv4 and UNIX-domain socket descriptors, with UDP echo client and server commands."
requires-python = ">=3.10"
dependencies = []
keywords = ["socket", "udp", "networking", "echo", "descriptor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sockdesc-udp-client = "sockdesc.udp_echo:client_main"
sockdesc-udp-server = "sockdesc.udp_echo:server_main"

[tool.hatch.build.targets.wheel]
packages = ["sockdesc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
