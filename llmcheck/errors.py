"""Exceptions raised to callers of llmcheck's outer surfaces.

Detection, scoring, matching and advising never raise; these are reserved
for explicit user actions such as exporting a report or loading config.
"""

from __future__ import annotations


class LLMCheckError(RuntimeError):
    pass


class ReportExportError(LLMCheckError):
    """Raised when a report cannot be rendered or written."""
