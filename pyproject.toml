[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threesisters"
version = "0.1.0"
description = "A small 2D game engine core: entity-component-system, tag pool, orthographic camera, physics helpers, batched sprite rendering and text layout."
requires-python = ">=3.10"
keywords = ["ecs", "entity-component-system", "game-engine", "2d", "sprites", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "numpy",
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["threesisters"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
