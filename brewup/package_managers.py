"""
Homebrew command definitions and the outdated-package probe.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from .common import vlog
from .runner import RunOptions, run_command


@dataclass(frozen=True)
class PackageManager:
    """
    Package manager definition.

    Attributes:
        name: Package manager identifier
        outdated_command: Read-only query listing outdated package names, one per line
        upgrade_command: Upgrade command prefix; package names are appended
        cleanup_command: Command that removes superseded versions
    """
    name: str
    outdated_command: tuple[str, ...]
    upgrade_command: tuple[str, ...]
    cleanup_command: tuple[str, ...]

    def get_upgrade_command(self, packages: Sequence[str] = ()) -> tuple[str, ...]:
        """
        Get the upgrade command for some packages.

        Args:
            packages: Packages to upgrade; empty means everything outdated

        Returns:
            Command tuple
        """
        return self.upgrade_command + tuple(packages)

    def get_cleanup_command(self) -> tuple[str, ...]:
        """Get the cleanup command."""
        return self.cleanup_command


HOMEBREW = PackageManager(
    name="brew",
    # --greedy includes casks that update themselves
    outdated_command=("brew", "outdated", "--quiet", "--greedy"),
    upgrade_command=("brew", "upgrade"),
    cleanup_command=("brew", "cleanup", "--prune=all"),
)


@dataclass(frozen=True)
class OutdatedProbe:
    """
    Outcome of asking the package manager for outdated packages.

    A failed probe carries an empty package set, so nothing is upgraded.

    Attributes:
        packages: Outdated package identifiers
        success: Whether the query itself succeeded
        error_message: Why the query failed
    """
    packages: frozenset[str]
    success: bool
    error_message: str | None = None


def parse_outdated_output(output: str) -> frozenset[str]:
    """
    Parse newline-delimited package names, skipping blank lines.

    Args:
        output: Standard output of the outdated query

    Returns:
        Set of package identifiers
    """
    return frozenset(line.strip() for line in output.splitlines() if line.strip())


def probe_outdated(options: RunOptions, manager: PackageManager = HOMEBREW) -> OutdatedProbe:
    """
    Query the package manager for outdated packages.

    The query is read-only, so it runs even in dry-run mode.

    Args:
        options: Execution switches
        manager: Package manager to query

    Returns:
        OutdatedProbe; on failure success is False and packages is empty
    """
    result = run_command(manager.outdated_command, replace(options, dry_run=False))
    if not result.success:
        return OutdatedProbe(
            packages=frozenset(),
            success=False,
            error_message=result.error_message,
        )

    packages = parse_outdated_output(result.stdout)
    vlog(f"Outdated packages: {sorted(packages)}", options.verbose)
    return OutdatedProbe(packages=packages, success=True)
