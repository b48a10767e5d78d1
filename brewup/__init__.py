"""
brewup - Category-aware Homebrew upgrades.

Modules:
- config: Category file discovery and parsing
- selection: Active category selection from CLI input
- package_managers: Homebrew commands and the outdated-package probe
- runner: Synchronous external command execution with dry-run support
- upgrade: Per-category upgrade orchestration
"""

__version__ = "1.0.0"

from .config import (
    CATEGORY_NAMES,
    HIGHEST_PRIORITY,
    PRIORITY,
    LARGE_SIZE,
    Categories,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    get_search_paths,
    find_config_file,
    load_config,
)
from .selection import select_categories, is_full_selection
from .runner import RunOptions, CommandResult, run_command
from .package_managers import (
    PackageManager,
    HOMEBREW,
    OutdatedProbe,
    parse_outdated_output,
    probe_outdated,
)
from .upgrade import (
    find_upgradable,
    upgrade_category,
    upgrade_large_packages,
    execute_upgrade,
)
from .logging_config import setup_logging, get_logger

__all__ = [
    "__version__",
    # Config
    "CATEGORY_NAMES",
    "HIGHEST_PRIORITY",
    "PRIORITY",
    "LARGE_SIZE",
    "Categories",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "get_search_paths",
    "find_config_file",
    "load_config",
    # Selection
    "select_categories",
    "is_full_selection",
    # Execution
    "RunOptions",
    "CommandResult",
    "run_command",
    "PackageManager",
    "HOMEBREW",
    "OutdatedProbe",
    "parse_outdated_output",
    "probe_outdated",
    # Upgrade
    "find_upgradable",
    "upgrade_category",
    "upgrade_large_packages",
    "execute_upgrade",
    # Logging
    "setup_logging",
    "get_logger",
]
