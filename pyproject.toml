[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mistengine"
version = "0.1.0"
description = "A small scene, camera and rigid-body physics engine with a headless editor loop"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game engine", "physics", "collision", "scene", "camera", "ecs"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mist-editor = "mistengine.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["mistengine"]

[tool.pytest.ini_options]
addopts = "-ra"
