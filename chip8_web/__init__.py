"""Chip-8 web front-end"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("chip8-web")
except PackageNotFoundError:
    __version__ = "dev"
