[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "framepipe"
version = "0.1.0"
description = "Callback-to-iterator bridges for simulated frame decoders, with producer/consumer demos"
requires-python = ">=3.10"
dependencies = []
keywords = ["concurrency", "callbacks", "iterator", "producer-consumer", "decoder", "futures"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
framepipe-cache-demo = "framepipe.cache_demo:main"
framepipe-sequence-demo = "framepipe.sequence_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["framepipe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
