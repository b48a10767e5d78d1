"""
External command execution.

Every command runs synchronously to completion. Failures are reported and
returned as data, never raised, so callers can carry on with the next step.
"""

from __future__ import annotations

import subprocess
import time
from dataclasses import dataclass
from typing import Sequence

from .common import format_command, vlog
from .logging_config import get_logger


@dataclass(frozen=True)
class RunOptions:
    """
    Per-invocation execution switches.

    Attributes:
        dry_run: Announce commands without executing them
        verbose: Emit verbose traces
    """
    dry_run: bool = False
    verbose: bool = False


@dataclass(frozen=True)
class CommandResult:
    """
    Result of running a single external command.

    Attributes:
        command: The command that was run
        success: Whether the command exited with status 0
        stdout: Standard output
        stderr: Standard error
        exit_code: Process exit code (-1 if it never started)
        duration_seconds: Wall time spent
        dry_run: True if the command was only announced
        error_message: Human-readable error message if failed
    """
    command: tuple[str, ...]
    success: bool
    stdout: str
    stderr: str
    exit_code: int
    duration_seconds: float
    dry_run: bool = False
    error_message: str | None = None

    @property
    def output(self) -> str:
        """Combined stdout and stderr text."""
        return self.stdout + self.stderr


def run_command(command: Sequence[str], options: RunOptions) -> CommandResult:
    """
    Run an external command and capture its output.

    In dry-run mode the command is announced and a successful result with
    empty output is returned without starting a process.

    Args:
        command: Command and arguments
        options: Execution switches

    Returns:
        CommandResult with execution outcome
    """
    command = tuple(command)
    logger = get_logger()

    if options.dry_run:
        logger.info(f"[dry-run] {format_command(command)}")
        return CommandResult(
            command=command,
            success=True,
            stdout="",
            stderr="",
            exit_code=0,
            duration_seconds=0.0,
            dry_run=True,
        )

    vlog(f"Executing: {format_command(command)}", options.verbose)
    start_time = time.time()

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        error_msg = f"Command not found: {command[0]}"
        logger.error(f"Error executing {format_command(command)}: {error_msg}")
        return CommandResult(
            command=command,
            success=False,
            stdout="",
            stderr="",
            exit_code=-1,
            duration_seconds=time.time() - start_time,
            error_message=error_msg,
        )
    except OSError as e:
        error_msg = f"Could not start command: {e}"
        logger.error(f"Error executing {format_command(command)}: {error_msg}")
        return CommandResult(
            command=command,
            success=False,
            stdout="",
            stderr="",
            exit_code=-1,
            duration_seconds=time.time() - start_time,
            error_message=error_msg,
        )

    duration = time.time() - start_time
    success = result.returncode == 0

    error_msg = None
    if not success:
        error_msg = f"Command failed with exit code {result.returncode}"
        if result.stderr:
            error_msg += f": {result.stderr.strip()[:200]}"
        logger.error(f"Error executing {format_command(command)}: {error_msg}")

    command_result = CommandResult(
        command=command,
        success=success,
        stdout=result.stdout,
        stderr=result.stderr,
        exit_code=result.returncode,
        duration_seconds=duration,
        error_message=error_msg,
    )
    if command_result.output.strip():
        vlog(
            f"Output of {format_command(command)}:\n{command_result.output.rstrip()}",
            options.verbose,
        )

    return command_result
