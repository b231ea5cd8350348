[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oledgfx"
version = "0.1.0"
description = "Graphics primitives, a 5x7 font and a simulated SSD1351 colour OLED panel"
requires-python = ">=3.10"
dependencies = []
keywords = ["oled", "ssd1351", "graphics", "font", "rgb565", "simulation", "accelerometer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oledgfx"]

[tool.pytest.ini_options]
addopts = "-ra"
