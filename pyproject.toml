[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sphsim"
version = "0.1.0"
description = "A small entity-component-system core with camera and falling-sphere systems for particle simulations"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["ecs", "entity-component-system", "sparse-set", "simulation", "particles", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sphsim"]

[tool.pytest.ini_options]
addopts = "-ra"
