"""
Aptos CLI invocations.

Both commands run in the package directory and inherit stdin/stdout/stderr,
so the aptos CLI's own output and prompts reach the operator directly.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence, Union

from .config import COMPILE_COMMAND, PUBLISH_COMMAND
from .errors import CompilationError, PublishCommandError


def run_command(args: Sequence[str], cwd: Union[str, Path] = ".") -> int:
    """Run a command with inherited stdio and return its exit code."""
    return subprocess.run(list(args), cwd=str(cwd), check=False).returncode


def compile_package(
    cwd: Union[str, Path] = ".",
    args: Sequence[str] = COMPILE_COMMAND,
) -> None:
    """
    Compile the Move package.

    Raises:
        CompilationError: If the compiler is missing or exits non-zero
    """
    try:
        code = run_command(args, cwd)
    except FileNotFoundError as exc:
        raise CompilationError(f"Compilation failed: {args[0]} not found") from exc
    if code != 0:
        raise CompilationError(f"Compilation failed: exit code {code}")


def publish_package_cli(
    cwd: Union[str, Path] = ".",
    args: Sequence[str] = PUBLISH_COMMAND,
) -> None:
    """
    Publish the Move package through the aptos CLI.

    Raises:
        PublishCommandError: If the CLI is missing or exits non-zero
    """
    try:
        code = run_command(args, cwd)
    except FileNotFoundError as exc:
        raise PublishCommandError(f"Publish failed: {args[0]} not found") from exc
    if code != 0:
        raise PublishCommandError(f"Publish failed: exit code {code}")
