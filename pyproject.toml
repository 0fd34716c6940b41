[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linobase"
version = "0.1.0"
description = "Mobile-base kinematics, IMU axis presets and a framed serial message protocol for small robots"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "kinematics", "serial", "protocol", "imu", "mecanum"]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linobase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
