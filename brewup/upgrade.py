"""
Category-aware upgrade orchestration.

Categories are processed in a fixed order. Regular categories are upgraded
in one batch followed by a cleanup. Large packages are upgraded one at a
time, each followed by its own cleanup, so the superseded version is removed
before the next large download starts. When every category is selected a
final full upgrade catches outdated packages not declared anywhere.
"""

from __future__ import annotations

from typing import AbstractSet, Sequence

from .common import vlog
from .config import CATEGORY_NAMES, LARGE_SIZE, Categories
from .logging_config import get_logger
from .package_managers import HOMEBREW, PackageManager
from .runner import RunOptions, run_command
from .selection import is_full_selection


def find_upgradable(packages: Sequence[str], outdated: AbstractSet[str]) -> list[str]:
    """
    Get the declared packages that are outdated, in declared order.

    Args:
        packages: Declared packages of a category
        outdated: Outdated package identifiers

    Returns:
        Outdated packages in declared order
    """
    return [package for package in packages if package in outdated]


def upgrade_category(
    name: str,
    packages: Sequence[str],
    outdated: AbstractSet[str],
    options: RunOptions,
    manager: PackageManager = HOMEBREW,
) -> None:
    """Upgrade the outdated packages of a category in one batch, then clean up."""
    upgradable = find_upgradable(packages, outdated)
    if not upgradable:
        vlog(f"No outdated packages found in category: {name}", options.verbose)
        return

    get_logger().info(f"Upgrading {name} packages: {', '.join(upgradable)}")
    run_command(manager.get_upgrade_command(upgradable), options)
    run_command(manager.get_cleanup_command(), options)


def upgrade_large_packages(
    packages: Sequence[str],
    outdated: AbstractSet[str],
    options: RunOptions,
    manager: PackageManager = HOMEBREW,
) -> None:
    """Upgrade outdated large packages one by one, cleaning up after each."""
    for package in packages:
        if package not in outdated:
            vlog(f"Skipping package (not outdated): {package}", options.verbose)
            continue

        get_logger().info(f"Upgrading {LARGE_SIZE} package: {package}")
        run_command(manager.get_upgrade_command([package]), options)
        run_command(manager.get_cleanup_command(), options)


def execute_upgrade(
    selection: AbstractSet[str],
    categories: Categories,
    outdated: AbstractSet[str],
    options: RunOptions,
    manager: PackageManager = HOMEBREW,
) -> None:
    """
    Upgrade the selected categories.

    Failures of individual commands are reported by the runner and do not
    stop later steps.

    Args:
        selection: Selected category names
        categories: Declared packages per category
        outdated: Outdated package identifiers
        options: Execution switches
        manager: Package manager to drive
    """
    for name in CATEGORY_NAMES:
        if name not in selection:
            continue

        packages = categories.packages_for(name)
        if name == LARGE_SIZE:
            upgrade_large_packages(packages, outdated, options, manager)
        else:
            upgrade_category(name, packages, outdated, options, manager)

    if is_full_selection(selection) and outdated:
        get_logger().info("All categories selected, running full upgrade.")
        run_command(manager.get_upgrade_command(), options)
        run_command(manager.get_cleanup_command(), options)
    elif not outdated:
        vlog("No outdated packages found for full upgrade.", options.verbose)
    else:
        vlog("Not all categories selected, skipping full upgrade.", options.verbose)
