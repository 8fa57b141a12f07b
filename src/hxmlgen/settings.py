"""
Plugin settings and global environment configuration.

Settings are stored as JSON in the per-plugin data directory. They are loaded
once at startup (the file is created with defaults if it does not exist) and
saved back at shutdown.

Global classpaths are process-wide include roots added to every project. They
come from the settings file followed by the HXMLGEN_GLOBAL_CLASSPATHS
environment variable (entries separated by os.pathsep).
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List

logger = logging.getLogger(__name__)

GLOBAL_CLASSPATHS_ENV_VAR = "HXMLGEN_GLOBAL_CLASSPATHS"
DEFAULT_PROMPT_VALUE = "build.hxml"


class SettingsError(Exception):
    """Raised when the settings file exists but cannot be parsed."""

    pass


@dataclass
class Settings:
    """Plugin-level preferences.

    Attributes:
        prompt_default: Text pre-filled in the output file prompt
        global_classpaths: Include roots added to every project
        verbose: Enable verbose console output
    """

    prompt_default: str = DEFAULT_PROMPT_VALUE
    global_classpaths: List[str] = field(default_factory=list)
    verbose: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """
        Parse settings from a dictionary, falling back to defaults for missing keys.

        Raises:
            ValueError: If a field has the wrong type
        """
        prompt_default = data.get("prompt_default", DEFAULT_PROMPT_VALUE)
        global_classpaths = data.get("global_classpaths", [])
        verbose = data.get("verbose", False)

        if not isinstance(prompt_default, str):
            raise ValueError(f"prompt_default must be a string, got {type(prompt_default).__name__}")
        if not isinstance(global_classpaths, list) or not all(isinstance(p, str) for p in global_classpaths):
            raise ValueError("global_classpaths must be a list of strings")
        if not isinstance(verbose, bool):
            raise ValueError(f"verbose must be a boolean, got {type(verbose).__name__}")

        return cls(prompt_default=prompt_default, global_classpaths=list(global_classpaths), verbose=verbose)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prompt_default": self.prompt_default,
            "global_classpaths": list(self.global_classpaths),
            "verbose": self.verbose,
        }


def save_settings(settings_file: Path, settings: Settings) -> None:
    """
    Write settings to disk as JSON.

    Args:
        settings_file: Destination file (parent directory must exist)
        settings: Settings to write
    """
    with open(settings_file, "w", encoding="utf-8") as f:
        json.dump(settings.to_dict(), f, indent=2)
        f.write("\n")
    logger.debug(f"Saved settings to {settings_file}")


def load_settings(settings_file: Path) -> Settings:
    """
    Load settings from disk, creating the file with defaults if it is absent.

    Args:
        settings_file: Settings file path

    Returns:
        Loaded settings

    Raises:
        SettingsError: If the file exists but is not valid settings JSON
    """
    if not settings_file.exists():
        settings = Settings()
        save_settings(settings_file, settings)
        logger.debug(f"Created default settings at {settings_file}")
        return settings

    try:
        with open(settings_file, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("settings root must be a JSON object")
        return Settings.from_dict(data)
    except (json.JSONDecodeError, ValueError) as e:
        raise SettingsError(f"Invalid settings file {settings_file}: {e}") from e


def _dedupe(paths: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    result: list[str] = []
    for path in paths:
        if path and path not in seen:
            seen.add(path)
            result.append(path)
    return tuple(result)


@dataclass(frozen=True)
class GlobalEnvironment:
    """Process-wide environment configuration, read-only to the generator.

    Attributes:
        global_classpaths: Ordered include roots added to every project
    """

    global_classpaths: tuple[str, ...] = ()

    @classmethod
    def from_environ(cls, settings: Settings | None = None, extra_classpaths: Iterable[str] = ()) -> "GlobalEnvironment":
        """
        Build the global environment from settings, HXMLGEN_GLOBAL_CLASSPATHS and extra paths.

        Order is settings entries, then environment entries, then extra entries.
        Duplicates and empty entries are dropped, keeping the first occurrence.

        Args:
            settings: Loaded plugin settings (optional)
            extra_classpaths: Additional paths (e.g. from the command line)

        Returns:
            GlobalEnvironment snapshot
        """
        paths: list[str] = []
        if settings is not None:
            paths.extend(settings.global_classpaths)

        env_value = os.environ.get(GLOBAL_CLASSPATHS_ENV_VAR, "")
        if env_value:
            paths.extend(p.strip() for p in env_value.split(os.pathsep))

        paths.extend(extra_classpaths)
        return cls(global_classpaths=_dedupe(paths))
