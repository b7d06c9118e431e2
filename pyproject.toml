[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scriptlist"
version = "1.0.0"
description = "Service logic for a user-script hosting site: gray release controls, access roles, notification templates, tags, webhooks and statistics charts"
requires-python = ">=3.10"
dependencies = [
    "jinja2",
]
keywords = [
    "userscript",
    "script hosting",
    "gray release",
    "access control",
    "email templates",
    "webhook",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["scriptlist"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
