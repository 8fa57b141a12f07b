"""
Data directory configuration.

Centralized path definitions for plugin data files. Supports development mode
to isolate settings from a regular installation.

Modes:
- Production (default): ~/.hxmlgen/data/HXMLGenerator/
- Development (HXMLGEN_DEV_MODE=1): ~/.hxmlgen/data_dev/HXMLGenerator/
- Override (HXMLGEN_DATA_DIR=<dir>): <dir>/HXMLGenerator/
"""

import os
from pathlib import Path

PLUGIN_NAME = "HXMLGenerator"
SETTINGS_FILENAME = "Settings.json"


def is_dev_mode() -> bool:
    """Check if development mode is enabled."""
    return os.environ.get("HXMLGEN_DEV_MODE") == "1"


def get_data_root() -> Path:
    """Get the data root directory respecting HXMLGEN_DATA_DIR and HXMLGEN_DEV_MODE.

    Returns:
        Path to the data root directory
    """
    data_env = os.environ.get("HXMLGEN_DATA_DIR")
    if data_env:
        return Path(data_env).resolve()
    elif is_dev_mode():
        return Path.home() / ".hxmlgen" / "data_dev"
    else:
        return Path.home() / ".hxmlgen" / "data"


def get_plugin_data_dir(data_root: Path | None = None) -> Path:
    """Get the per-plugin data directory (not created)."""
    root = data_root if data_root is not None else get_data_root()
    return root / PLUGIN_NAME


def get_settings_file(data_root: Path | None = None) -> Path:
    """Get the settings file path inside the per-plugin data directory."""
    return get_plugin_data_dir(data_root) / SETTINGS_FILENAME
