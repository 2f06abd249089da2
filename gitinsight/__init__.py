"""gitinsight — Git repository snapshot and dependency-advisory report."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gitinsight")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"
