"""
JSON output adapter.

Renders scan results as JSON for machine processing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TextIO

from csvcursor.cli.output.base import OutputAdapter, OutputFormat
from csvcursor.core.tokenizer import Severity

if TYPE_CHECKING:
    from csvcursor.cli.scan import ScanResult
    from csvcursor.core.tokenizer import TokenizerIssue


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, color: bool = False, indent: int = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_result(self, result: ScanResult) -> str:
        """Render scan result as JSON."""
        output: dict[str, Any] = {
            "file": result.file,
            "fields": [entry.model_dump() for entry in result.fields],
            "records": [entry.model_dump() for entry in result.records],
            "issues": [self._issue_to_dict(issue) for issue in result.issues],
            "summary": {
                "field_count": len(result.fields),
                "record_count": len(result.records),
                "fatal_count": result.count(Severity.FATAL),
                "error_count": result.count(Severity.ERROR),
                "warn_count": result.count(Severity.WARN),
            },
        }

        return json.dumps(output, indent=self.indent, default=str)

    def _issue_to_dict(self, issue: TokenizerIssue) -> dict[str, Any]:
        """Convert issue to dictionary."""
        return {
            "code": issue.code,
            "severity": issue.severity.value,
            "title": issue.title,
            "message": issue.message,
            "location": issue.location.model_dump(exclude_none=True),
            "context": issue.context,
        }
