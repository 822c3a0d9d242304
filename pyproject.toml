[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apsurvey"
version = "0.1.0"
description = "Wi-Fi access point survey: scan results, client counting, NMEA GPS tagging and tabular reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["wifi", "survey", "access point", "nmea", "gps", "rssi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["apsurvey"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
