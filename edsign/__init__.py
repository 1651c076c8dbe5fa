from importlib.metadata import PackageNotFoundError, version

try:
  __version__ = version("edsign")
except PackageNotFoundError:
  __version__ = "unknown"
