[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pirkit"
version = "0.1.0"
description = "Test tooling for private information retrieval services: data generation, party addressing, JSON and line-file helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["pir", "mpc", "testing", "benchmark", "data-generation"]
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
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["pirkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
