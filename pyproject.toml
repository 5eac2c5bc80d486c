[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qdsp"
version = "0.1.0"
description = "Audio DSP building blocks: filters, oscillators, FFT, MIDI messages and zero-crossing analysis"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "filter", "biquad", "oscillator", "fft", "midi", "zero-crossing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qdsp"]

[tool.pytest.ini_options]
addopts = "-ra"
