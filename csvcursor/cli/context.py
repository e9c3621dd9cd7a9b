"""
CLI context and configuration.

Manages CLI state, exit codes, and shared context.
"""

from __future__ import annotations

import os
from enum import IntEnum
from pathlib import Path  # noqa: TC003

from pydantic import BaseModel, Field

from csvcursor.core.tokenizer import Severity

# Default input size limit for CLI usage (can be overridden via flag/env).
DEFAULT_MAX_BYTES = 100 * 1024 * 1024  # 100 MiB
MAX_BYTES_ENV = "CSVCURSOR_MAX_BYTES"


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0  # No issues found
    ERROR = 1  # Warnings or errors found
    FATAL = 2  # Tokenizing aborted
    USAGE = 64  # Command line usage error


class CliContext(BaseModel):
    """Shared context for CLI commands."""

    # Output settings
    format: str = Field(default="terminal")
    output_file: Path | None = Field(default=None)
    color: bool = Field(default=True)
    quiet: bool = Field(default=False)
    verbose: bool = Field(default=False)

    # Input settings
    encoding: str | None = Field(default=None)
    max_bytes: int | None = Field(default=DEFAULT_MAX_BYTES)

    model_config = {"frozen": False}


def resolve_max_bytes(max_bytes: int | None) -> int | None:
    """
    Resolve the input size limit from flag, environment or default.

    Returns:
        Limit in bytes, or None for unlimited

    Raises:
        ValueError: If the environment variable is not an integer
    """
    if max_bytes is not None:
        return None if max_bytes <= 0 else max_bytes

    env_value = os.environ.get(MAX_BYTES_ENV)
    if env_value:
        try:
            parsed = int(env_value)
        except ValueError:
            raise ValueError(f"{MAX_BYTES_ENV} must be an integer") from None
        return None if parsed <= 0 else parsed

    return DEFAULT_MAX_BYTES


def get_exit_code(severities: list[Severity]) -> ExitCode:
    """Determine exit code from the severities of reported issues."""
    if Severity.FATAL in severities:
        return ExitCode.FATAL
    if Severity.ERROR in severities or Severity.WARN in severities:
        return ExitCode.ERROR
    return ExitCode.SUCCESS
