"""
Utility helpers used by the import tool.

This subpackage exposes the error taxonomy, structured run reports, the
escaping helpers used when writing the import document and the
category/tag classification.
"""

from .errors import (
    ERRORS,
    ConfigurationError,
    ImportFailedError,
    ImportToolError,
    ParseError,
    report_error,
    report_ok,
    report_skip,
)
from .escaping import PreEscaped, escape, paragraph_breaks
from .taxonomy import classify_terms

__all__ = [
    "ERRORS",
    "ConfigurationError",
    "ImportFailedError",
    "ImportToolError",
    "ParseError",
    "report_error",
    "report_ok",
    "report_skip",
    "PreEscaped",
    "escape",
    "paragraph_breaks",
    "classify_terms",
]
