[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlproto"
version = "0.1.0"
description = "Turn SQL CREATE TABLE schemas into table and field descriptions for Protobuf service definitions"
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "ddl", "protobuf", "proto", "schema", "code-generation", "grpc", "rest"]
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
    "Topic :: Software Development :: Code Generators",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sqlproto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
