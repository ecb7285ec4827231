"""vuescaffold: Vue 3 project generator driven by a composable template tree."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("vuescaffold")
except PackageNotFoundError:
    __version__ = "0.0.0"
