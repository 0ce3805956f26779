[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soundchip"
version = "0.1.0"
description = "Retro sound chip synthesis: wavetable channels, noise, envelopes and chip presets."
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "synthesis", "chiptune", "psg", "wavetable", "envelope", "lfsr"]
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
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["soundchip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
