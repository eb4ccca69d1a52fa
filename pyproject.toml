[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tunelist"
version = "0.1.0"
description = "Build, browse and edit playlists of solfège songs from CSV files"
requires-python = ">=3.10"
dependencies = []
keywords = ["playlist", "music", "solfege", "notes", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tunelist = "tunelist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tunelist"]

[tool.pytest.ini_options]
addopts = "-ra"
