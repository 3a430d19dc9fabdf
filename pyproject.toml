[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "superseq"
version = "0.1.0"
description = "Menu model of a drum and synth sequencer editor, driven by scripted controller frames and rendered as drawing commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["sequencer", "drum machine", "synthesizer", "music", "ui", "menu"]
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
    "Topic :: Multimedia :: Sound/Audio :: Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
superseq = "superseq.app:main"

[tool.hatch.build.targets.wheel]
packages = ["superseq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
