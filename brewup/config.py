"""
Category configuration discovery and parsing.

The category file is a YAML document of the form::

    categories:
      highest_priority: [git, openssl@3]
      priority: [node]
      large_size: [xcodes, docker]

It is searched for in several locations (see ``get_search_paths``) and the
first existing file wins. No merging happens between locations.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Any, Mapping

import yaml

from .common import vlog
from .logging_config import get_logger


DEFAULT_CONFIG_FILENAME = "packages.yaml"

# Colon-separated directories searched before the default locations
CONFIG_PATHS_ENV = "BREWUP_CONFIG_PATHS"

USER_CONFIG_DIR = "~/.brew-aware-upgrade"

HIGHEST_PRIORITY = "highest_priority"
PRIORITY = "priority"
LARGE_SIZE = "large_size"

# Processing order of the categories; it is also the full selection.
CATEGORY_NAMES = (HIGHEST_PRIORITY, PRIORITY, LARGE_SIZE)


class ConfigError(Exception):
    """
    Base exception for configuration errors.

    Attributes:
        message: Human-readable error message
        path: File the error relates to, if any
    """
    def __init__(self, message: str, path: str | None = None):
        self.message = message
        self.path = path
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """No candidate location holds the requested config file."""


class ConfigParseError(ConfigError):
    """The config file exists but is unreadable or does not match the schema."""


# Null spellings; the base loader leaves them as plain text.
_NULL_SCALARS = {"", "~", "null", "Null", "NULL"}


def _parse_package_list(name: str, value: Any) -> tuple[str, ...]:
    if value is None or (isinstance(value, str) and value in _NULL_SCALARS):
        return ()
    if not isinstance(value, list):
        raise ConfigParseError(
            f"Category '{name}' must be a list of package names, got {type(value).__name__}"
        )
    for item in value:
        if not isinstance(item, str):
            raise ConfigParseError(
                f"Category '{name}' contains a non-string entry: {item!r}"
            )
    return tuple(value)


@dataclass(frozen=True)
class Categories:
    """
    Package identifiers declared per category.

    Attributes:
        highest_priority: Packages upgraded first, in one batch
        priority: Packages upgraded second, in one batch
        large_size: Packages upgraded one at a time with a cleanup after each
        source: Path to the configuration file that was loaded
    """
    highest_priority: tuple[str, ...] = ()
    priority: tuple[str, ...] = ()
    large_size: tuple[str, ...] = ()
    source: str = ""

    def packages_for(self, name: str) -> tuple[str, ...]:
        """
        Get the declared packages of a category.

        Args:
            name: Category name

        Returns:
            Declared packages in order, or an empty tuple for unknown names
        """
        if name not in CATEGORY_NAMES:
            return ()
        return getattr(self, name)

    @staticmethod
    def from_dict(data: Any, source: str = "", verbose: bool = False) -> Categories:
        """
        Create Categories from a parsed YAML document.

        Raises:
            ConfigParseError: If the document does not match the schema
        """
        if not isinstance(data, dict):
            raise ConfigParseError("Config document must be a mapping", source or None)

        section = data.get("categories")
        if not isinstance(section, dict):
            raise ConfigParseError(
                "Config document must contain a 'categories' mapping", source or None
            )

        for key in section:
            if key not in CATEGORY_NAMES:
                vlog(f"Ignoring unknown category key in config: {key}", verbose)

        try:
            return Categories(
                highest_priority=_parse_package_list(HIGHEST_PRIORITY, section.get(HIGHEST_PRIORITY)),
                priority=_parse_package_list(PRIORITY, section.get(PRIORITY)),
                large_size=_parse_package_list(LARGE_SIZE, section.get(LARGE_SIZE)),
                source=source,
            )
        except ConfigParseError as e:
            e.path = source or None
            raise


def get_search_paths(
    filename: str,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    """
    Build the ordered list of candidate config paths.

    Order (highest priority first):
    1. Each directory of $BREWUP_CONFIG_PATHS, in the order given
    2. Directory of the running script
    3. ~/.brew-aware-upgrade/
    4. Current working directory

    Args:
        filename: Config file name
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Candidate paths in search order
    """
    if environ is None:
        environ = os.environ

    paths = []

    custom_paths = environ.get(CONFIG_PATHS_ENV, "")
    if custom_paths:
        paths.extend(
            os.path.join(directory, filename)
            for directory in custom_paths.split(":")
            if directory
        )

    script_dir = os.path.dirname(os.path.abspath(sys.argv[0]))
    paths.append(os.path.join(script_dir, filename))
    paths.append(os.path.join(os.path.expanduser(USER_CONFIG_DIR), filename))
    paths.append(filename)

    return paths


def find_config_file(
    filename: str,
    environ: Mapping[str, str] | None = None,
    verbose: bool = False,
) -> str:
    """
    Find the first existing config file along the search path.

    Raises:
        ConfigNotFoundError: If no candidate path exists
    """
    for path in get_search_paths(filename, environ):
        if os.path.exists(path):
            return path
        vlog(f"Config not found at: {path}", verbose)

    raise ConfigNotFoundError(f"config file not found: {filename}")


def load_config(
    filename: str = DEFAULT_CONFIG_FILENAME,
    environ: Mapping[str, str] | None = None,
    verbose: bool = False,
) -> Categories:
    """
    Locate and parse the category configuration.

    Args:
        filename: Config file name or path
        environ: Environment mapping (defaults to os.environ)
        verbose: Enable verbose logging

    Returns:
        Parsed Categories

    Raises:
        ConfigNotFoundError: If the file cannot be found
        ConfigParseError: If the file cannot be read or parsed
    """
    path = find_config_file(filename, environ, verbose)
    get_logger().info(f"Using config file: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"error reading YAML file: {e}", path) from e

    vlog(f"Config file content:\n{content}", verbose)

    # BaseLoader keeps every scalar as text, so names like 2048 or yes stay strings
    try:
        data = yaml.load(content, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"error parsing YAML: {e}", path) from e

    return Categories.from_dict(data, source=path, verbose=verbose)
