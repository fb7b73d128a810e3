[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "greycheck"
version = "0.1.0"
description = "Convert colour images to greyscale and check the result against a reference image"
requires-python = ">=3.10"
keywords = ["image", "greyscale", "grayscale", "comparison", "testing"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
greycheck = "greycheck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["greycheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
