[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "composerkit"
version = "0.1.0"
description = "Form models, entry validators and a Packagist search client for composer.json editors"
requires-python = ">=3.10"
dependencies = []
keywords = ["composer", "composer.json", "php", "packagist", "manifest", "forms"]
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
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["composerkit"]

[tool.pytest.ini_options]
addopts = "-ra"
