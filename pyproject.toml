[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "honyakusha"
version = "1.0.0"
description = "Translate text using a variety of translation services"
requires-python = ">=3.11"
keywords = ["translation", "translate", "google", "bing", "deepl", "libretranslate", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Utilities",
]
dependencies = [
    "requests",
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
honyakusha = "honyakusha.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["honyakusha"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
