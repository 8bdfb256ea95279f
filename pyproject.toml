[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swaypix"
version = "0.1.0"
description = "Core of an image viewer for Sway: image frames, file lists, key bindings, info overlays and Sway IPC"
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "viewer", "sway", "wayland", "ipc", "slideshow"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["swaypix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
