[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slackbot"
version = "0.1.0"
description = "Send piped text to a Slack channel through an incoming webhook, tagged with host name and IP addresses"
requires-python = ">=3.10"
keywords = ["slack", "webhook", "notification", "cli", "monitoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "pyyaml>=6.0",
    "psutil>=5.9",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
slackbot = "slackbot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["slackbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
