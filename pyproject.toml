[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketkit"
version = "0.1.0"
description = "A pocket set of small tools: word counter, brace checker, unit converter, to-do list and URL shortener."
requires-python = ">=3.10"
keywords = ["wc", "todo", "unit-converter", "url-shortener", "cli", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "rich",
    "pymysql",
    "python-dotenv",
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pocket-wc = "pocketkit.wordcount:main"
pocket-braces = "pocketkit.braces:main"
pocket-convert = "pocketkit.converter:main"
pocket-todo = "pocketkit.todo:main"
pocket-shortener = "pocketkit.shortener:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
