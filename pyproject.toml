[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chess_engine"
version = "0.1.0"
description = "A basic chess engine library with FEN support, move generation, material evaluation and a minimal UCI loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "uci", "fen", "engine", "move-generation"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chess-engine-uci = "chess_engine.uci:main"

[tool.hatch.build.targets.wheel]
packages = ["chess_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
