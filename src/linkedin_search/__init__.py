# ABOUTME: Main package initialization for the LinkedIn search payload builder.
# ABOUTME: Exports version information from pyproject.toml.

from importlib.metadata import version

__version__ = version("linkedin-search")
