[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskapi"
version = "1.0.0"
description = "A small JSON task API with JWT login and pluggable in-memory, MongoDB or SQL storage."
requires-python = ">=3.10"
keywords = ["tasks", "rest", "api", "flask", "jwt", "mongodb", "sqlalchemy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "flask",
    "pyjwt",
    "pymongo",
    "sqlalchemy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskapi = "taskapi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["taskapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
