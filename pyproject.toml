[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "persona-update"
version = "0.1.0"
description = "HTTP service that updates person records stored in MongoDB"
requires-python = ">=3.10"
keywords = ["mongodb", "flask", "rest", "personas", "update"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "flask>=2.2",
    "pymongo>=4.2",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
persona-update = "persona_update.app:main"

[tool.hatch.build.targets.wheel]
packages = ["persona_update"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
