[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calicoapi"
version = "0.1.0"
description = "Network policy value types (ports, protocols, AS numbers) and in-memory informer and lister helpers for Calico-style resources"
requires-python = ">=3.10"
dependencies = []
keywords = ["calico", "network-policy", "bgp", "asn", "port", "protocol", "informer", "lister"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["calicoapi"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
