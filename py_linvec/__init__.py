"""Generic dense vectors over real and complex scalars for elementary linear algebra."""

import importlib.metadata

__version__ = importlib.metadata.version("py_linvec")

# Standard library imports
import os
import sys

# Third-party imports
from typing_extensions import Dict, Optional, TypedDict

# Local imports
from .exceptions import InvalidArgument
from .logger import logger as log
from .settings import Settings

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib


class SettingsDict(TypedDict, total=False):
    eps: float


_SETTERS = {
    'eps': Settings.set_eps,
}


def _apply_settings(settings: Dict[str, float]) -> None:
    for key, value in settings.items():
        if (setter := _SETTERS.get(key)) is None:
            log.warning(f"Unknown setting `{key}` ignored")
            continue
        setter(value)


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load configuration from a .pylinvec.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pylinvec.toml or pylinvec.toml
        suppress_warnings: If True, suppress warning messages
    """
    def find_pylinvec_toml(start_dir: str = os.getcwd()) -> Optional[str]:
        """Search for the config file starting from the specified directory and moving up.

        Returns:
            The absolute path to the config file if found, otherwise None.
        """
        current_dir = os.path.abspath(start_dir)
        while True:
            candidates = [
                os.path.join(current_dir, '.pylinvec.toml'),
                os.path.join(current_dir, 'pylinvec.toml'),
            ]
            for candidate in candidates:
                if os.path.exists(candidate):
                    return os.path.abspath(candidate)

            parent_dir = os.path.dirname(current_dir)
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        filepath = find_pylinvec_toml()

    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

        if (_section := _config.get('pylinvec')) is not None:
            _apply_settings(_section)
        elif not suppress_warnings:
            log.warning("Config has no `pylinvec` section")

    log.debug("Settings load success")


def _basic_config(filename: Optional[str] = None,
                  settings: Optional[SettingsDict] = None,
                  suppress_warnings: bool = False) -> None:
    """Load library settings from file or Mapping.

    Args:
        filename: Configuration file path
        settings: Dictionary of settings, e.g. `{'eps': 1e-10}`
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and settings are provided
    """
    if filename and settings:
        raise ValueError("Can't use settings and config file at same time")
    if not filename and settings:
        _apply_settings(settings)
    else:
        _load_config(filename, suppress_warnings)


basicConfig = _basic_config

basicConfig(suppress_warnings=True)


from .bisector import SupportsBisector, bisector
from .exceptions import VectorError, IndexOutOfRange, DimensionMismatch
from .logger import logger, enable_file_logging, disable_file_logging
from .settings import DEFAULT_EPS
from .vector import BaseVector, VectorReal, VectorComplex, make_vector

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__", "__path__",
    # Skip imported modules
    "tomllib", "sys", "os", "importlib",
    # Skip submodules and typing helpers
    "exceptions", "settings", "vector", "log",
    "Dict", "Optional", "TypedDict",
}
# Build __all__ from the module's global namespace
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
