"""flaskgen: Flask service boilerplate generator."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("flaskgen")
except PackageNotFoundError:
    __version__ = "0.0.0"
