[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evilwm"
version = "0.1.0"
description = "Infinite-canvas window manager core: geometry, viewport camera, momentum, input policy, IPC helpers, event logs and transfer probe reports"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "wayland",
    "compositor",
    "window-manager",
    "canvas",
    "viewport",
    "ipc",
]
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
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["evilwm"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
