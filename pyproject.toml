[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of classic software design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "bridge",
    "builder",
    "chain-of-responsibility",
    "composite",
    "decorator",
    "adapter",
    "facade",
    "factory",
    "iterator",
    "memento",
    "observer",
    "singleton",
    "state",
    "strategy",
    "visitor",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-bridge = "patternkit.bridge:main"
patternkit-builder = "patternkit.builder:main"
patternkit-chain = "patternkit.chain:main"
patternkit-composite = "patternkit.composite:main"
patternkit-iterator = "patternkit.iterator:main"
patternkit-singleton = "patternkit.singleton:main"
patternkit-adaptor = "patternkit.adaptor:main"
patternkit-facade = "patternkit.facade:main"
patternkit-notification = "patternkit.notification:main"
patternkit-memento = "patternkit.memento:main"
patternkit-strategy = "patternkit.strategy:main"
patternkit-visitor = "patternkit.visitor:main"
patternkit-observer = "patternkit.observer:main"
patternkit-stock-alerts = "patternkit.stock_alerts:main"
patternkit-document = "patternkit.document:main"
patternkit-mood = "patternkit.mood:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
