[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lajolla"
version = "0.1.0"
description = "Building blocks for a physically based renderer: vectors, spectra, PCG random numbers, ray differentials, phase functions, spheres, textures and progress reporting."
requires-python = ">=3.10"
dependencies = []
keywords = ["rendering", "path tracing", "ray tracing", "graphics", "monte carlo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lajolla"]

[tool.pytest.ini_options]
addopts = "-ra"
