"""
Output adapters for CLI.

Provides different output formats: terminal, JSON.
"""

from csvcursor.cli.output.base import OutputAdapter, OutputFormat, get_output_adapter
from csvcursor.cli.output.json import JsonOutput
from csvcursor.cli.output.terminal import TerminalOutput

__all__ = [
    "JsonOutput",
    "OutputAdapter",
    "OutputFormat",
    "TerminalOutput",
    "get_output_adapter",
]
