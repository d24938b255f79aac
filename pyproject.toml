[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gemkit"
version = "1.0.0"
description = "Building blocks for graph extraction from binary document images: monochrome PNG handling, Zernike moments, zone relations and core utilities"
requires-python = ">=3.10"
keywords = ["graph extraction", "zernike moments", "binary images", "image processing", "document analysis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gemkit"]

[tool.pytest.ini_options]
addopts = "-ra"
