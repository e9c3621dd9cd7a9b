"""
Terminal output adapter.

Renders fields, records and issues with optional ANSI colors.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from csvcursor.cli.output.base import OutputAdapter, OutputFormat
from csvcursor.core.tokenizer import Severity

if TYPE_CHECKING:
    from csvcursor.cli.scan import ScanResult
    from csvcursor.core.tokenizer import TokenizerIssue


# Check if Unicode is supported
def _supports_unicode() -> bool:
    """Check if terminal supports Unicode."""
    try:
        "✓".encode(sys.stdout.encoding or "utf-8")
        return True
    except (UnicodeEncodeError, LookupError):
        return False


# Severity colors
SEVERITY_COLORS = {
    "fatal": "bold red",
    "error": "red",
    "warn": "yellow",
    "info": "blue",
}

# Unicode and ASCII fallback symbols
SEVERITY_SYMBOLS_UNICODE = {
    "fatal": "✖",
    "error": "✖",
    "warn": "⚠",
    "info": "ℹ",
}

SEVERITY_SYMBOLS_ASCII = {
    "fatal": "X",
    "error": "X",
    "warn": "!",
    "info": "i",
}

SUCCESS_SYMBOL_UNICODE = "✓"
SUCCESS_SYMBOL_ASCII = "OK"

ANSI_CODES = {
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "bold red": "\033[1;31m",
}
ANSI_RESET = "\033[0m"


class TerminalOutput(OutputAdapter):
    """Human-readable terminal output."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()
        self._use_unicode = _supports_unicode()
        self._severity_symbols = SEVERITY_SYMBOLS_UNICODE if self._use_unicode else SEVERITY_SYMBOLS_ASCII
        self._success_symbol = SUCCESS_SYMBOL_UNICODE if self._use_unicode else SUCCESS_SYMBOL_ASCII

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_result(self, result: ScanResult) -> str:
        lines: list[str] = []

        if result.file:
            lines.append(self._style(result.file, "bold"))

        for entry in result.fields:
            location = self._style(f"L{entry.row}:C{entry.column}", "dim")
            lines.append(f"  {location} {entry.value!r}")

        for record in result.records:
            location = self._style(f"L{record.row}", "dim")
            values = ", ".join(repr(v) for v in record.values)
            lines.append(f"  {location} [{values}]")

        for issue in result.issues:
            lines.append(self._format_issue(issue))

        lines.append("")
        lines.append(self._format_summary(result))

        return "\n".join(lines)

    def _format_issue(self, issue: TokenizerIssue) -> str:
        """Format a single issue."""
        severity = issue.severity.value
        color = SEVERITY_COLORS.get(severity, "")
        symbol = self._severity_symbols.get(severity, "*")

        loc_parts = []
        if issue.location.row is not None:
            loc_parts.append(f"L{issue.location.row}")
        if issue.location.column is not None:
            loc_parts.append(f"C{issue.location.column}")
        location_str = ":".join(loc_parts)

        styled_symbol = self._style(symbol, color)
        styled_code = self._style(issue.code, "dim")

        if location_str:
            return f"  {styled_symbol} {location_str}: {issue.message} [{styled_code}]"
        return f"  {styled_symbol} {issue.message} [{styled_code}]"

    def _format_summary(self, result: ScanResult) -> str:
        """Format summary line."""
        parts = []

        fatal = result.count(Severity.FATAL)
        errors = result.count(Severity.ERROR)
        warnings = result.count(Severity.WARN)

        if fatal > 0:
            parts.append(self._style(f"{fatal} fatal", "bold red"))
        if errors > 0:
            parts.append(self._style(f"{errors} error(s)", "red"))
        if warnings > 0:
            parts.append(self._style(f"{warnings} warning(s)", "yellow"))

        if not parts:
            count = len(result.records) if result.records else len(result.fields)
            return self._style(f"{self._success_symbol} {count} item(s), no issues found.", "green")

        return f"Found: {', '.join(parts)}"

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text

        code = ANSI_CODES.get(style, "")
        if code:
            return f"{code}{text}{ANSI_RESET}"
        return text
