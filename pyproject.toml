[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mia"
version = "0.1.0"
description = "State, HTML rendering and stylesheets for Mia's chat, to-do and inbox views"
requires-python = ">=3.10"
dependencies = []
keywords = ["assistant", "todo", "chat", "email", "css", "html"]
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
    "Topic :: Office/Business :: Groupware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
