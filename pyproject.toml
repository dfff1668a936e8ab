[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dummyagent"
version = "0.1.0"
description = "A small terminal chat agent that talks to an OpenAI-compatible chat completions API and can read, list and edit local files."
requires-python = ">=3.10"
dependencies = [
    "httpx",
]
keywords = ["agent", "llm", "openai", "chat", "tools", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
    "respx",
]

[project.scripts]
dummyagent = "dummyagent.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dummyagent"]

[tool.pytest.ini_options]
addopts = "-ra"
