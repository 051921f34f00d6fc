"""Configuration loading for builder default profiles."""

import logging
import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Union, Optional, Any, Mapping

# Use tomllib for Python 3.11+, fallback to tomli for older versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        raise ImportError(
            "Python < 3.11 requires 'tomli' package. " +
            "Install it with: pip install tomli"
        )

from .paths import resolve_config_path

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class BuilderSettings:
    """Initial state for new builders; chained calls still override it"""

    debug: bool = False
    count_column: str = "*"
    count_alias: str = "total"
    warn_bare_offset: bool = True

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "BuilderSettings":
        """
        Build settings from a profile mapping.

        Raises:
            ValueError: If a key is unknown or a value has the wrong type

        Example:
            >>> BuilderSettings.from_dict({"debug": True, "count_alias": "n"})
            BuilderSettings(debug=True, count_column='*', count_alias='n', warn_bare_offset=True)
        """
        if not isinstance(values, Mapping):
            raise ValueError(
                "Builder settings must be a table of key/value pairs, "
                f"got {type(values).__name__}: {values!r}"
            )

        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(values) - set(known))
        if unknown:
            raise ValueError(
                f"Unknown builder setting(s): {', '.join(unknown)}. " +
                f"Valid settings: {', '.join(known)}"
            )

        for name, value in values.items():
            expected = type(getattr(cls, name))
            if not isinstance(value, expected):
                raise ValueError(
                    f"Setting '{name}' must be {expected.__name__}, "
                    f"got {type(value).__name__}: {value!r}"
                )

        return cls(**dict(values))

    @classmethod
    def from_env(cls) -> "BuilderSettings":
        """Defaults, with debug switched on by BABYSQL_DEBUG"""
        flag = os.getenv("BABYSQL_DEBUG", "")
        return cls(debug=flag.strip().lower() in _TRUTHY)


def _read_profiles(config_file: Path) -> Dict[str, Any]:
    with open(config_file, "rb") as f:
        return tomllib.load(f)


def load_profile(
    profile: str,
    path: Optional[Union[str, Path]] = None
) -> Dict[str, Any]:
    """
    Load a builder profile from babysql.toml.

    Args:
        profile: Name of the profile (TOML table) to load
        path: Optional explicit path to babysql.toml.
              If None, uses the configuration directory.

    Returns:
        Dictionary of raw settings for the profile

    Raises:
        FileNotFoundError: If babysql.toml is not found
        KeyError: If the specified profile doesn't exist in the file

    Example:
        >>> load_profile("dev")
        {'debug': True}
    """
    config_file = resolve_config_path(path)

    if not config_file.exists():
        raise FileNotFoundError(
            f"babysql configuration file not found at {config_file}. " +
            "Create a babysql.toml file or see babysql.toml.example for template."
        )

    all_profiles = _read_profiles(config_file)

    if profile not in all_profiles:
        available = ", ".join(all_profiles.keys())
        raise KeyError(
            f"Profile '{profile}' not found in {config_file}. " +
            f"Available profiles: {available}"
        )

    logger.debug("Loaded profile %r from %s", profile, config_file)
    return all_profiles[profile]


def list_profiles(path: Optional[Union[str, Path]] = None) -> list[str]:
    """
    List all available profiles in babysql.toml.

    Example:
        >>> list_profiles()
        ['default', 'dev']
    """
    try:
        config_file = resolve_config_path(path)
    except FileNotFoundError:
        return []

    if not config_file.exists():
        return []

    return list(_read_profiles(config_file).keys())


def load_settings(
    profile: Optional[str] = None,
    path: Optional[Union[str, Path]] = None
) -> BuilderSettings:
    """Settings for a named profile, or environment defaults when no profile is given"""
    if profile is None:
        return BuilderSettings.from_env()
    return BuilderSettings.from_dict(load_profile(profile, path))
