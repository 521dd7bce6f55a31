"""
Exceptions and structured run reports for the WordPress import.

The :mod:`wp_blog_import.utils.errors` module holds the exception taxonomy
raised by the import tool and centralizes the writing of report entries for
skipped posts, emitted posts and hand-off failures.  Each entry is appended
to a JSON Lines file under ``reports/import`` so that a run can be reviewed
or parsed afterwards.

Three public reporting functions are provided:

``report_skip``
    Record a source item that a filter excluded from the import.

``report_ok``
    Record a post written to the intermediate document.

``report_error``
    Record a failure.  An optional exception can be supplied and will be
    serialized to the log.

The ``ERRORS`` dictionary maps event codes to human readable messages.
Codes not present in the dictionary fall back to the code itself.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional


class ImportToolError(Exception):
    """Base class for every error raised by the import tool."""


class ConfigurationError(ImportToolError):
    """A required option is missing or a configuration value is invalid."""


class ParseError(ImportToolError):
    """The export file cannot be opened or is not a WordPress export."""


class ImportFailedError(ImportToolError):
    """The downstream blog importer reported a failure."""


# Mapping of event codes used throughout the import to descriptive messages.
ERRORS: Dict[str, str] = {
    "NOT_A_POST": "Item is not a blog post",
    "CHILD_POST": "Item has a parent post",
    "EMPTY_TITLE": "Post has an empty title",
    "DRAFT": "Unpublished draft",
    "POST_WRITTEN": "Post written to import document",
    "IMPORT_FAILED": "Blog importer failed",
}

REPORT_DIR = os.path.join("reports", "import")
_SKIP_LOG = "skipped.jsonl"
_OK_LOG = "success.jsonl"
_ERROR_LOG = "errors.jsonl"


def _write_jsonl(report_dir: str, name: str, data: Dict[str, Any]) -> None:
    """Append ``data`` as a JSON object followed by a newline to ``report_dir/name``."""
    os.makedirs(report_dir, exist_ok=True)
    with open(os.path.join(report_dir, name), "a", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False)
        f.write("\n")


def _entry(code: str, post: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "code": code,
        "message": ERRORS.get(code, code),
        "slug": post.get("slug"),
        "title": post.get("title"),
    }


def report_skip(code: str, post: Dict[str, Any], report_dir: Optional[str] = None) -> None:
    """Log that ``post`` was excluded by the filter identified by ``code``.

    Parameters
    ----------
    code:
        The skip reason.  ``NOT_A_POST``, ``CHILD_POST``, ``EMPTY_TITLE`` and
        ``DRAFT`` are the reasons used by the transformer.
    post:
        A mapping describing the source item.  Only the ``slug`` and
        ``title`` keys are referenced if present.
    report_dir:
        Directory receiving the report.  Defaults to :data:`REPORT_DIR`.
    """
    _write_jsonl(report_dir or REPORT_DIR, _SKIP_LOG, _entry(code, post))


def report_ok(
    code: str, post: Dict[str, Any], extra: Optional[Dict[str, Any]] = None, report_dir: Optional[str] = None
) -> None:
    """Log a successful event for ``post``.

    ``extra`` is merged into the entry when given.
    """
    entry = _entry(code, post)
    if extra:
        entry.update(extra)
    _write_jsonl(report_dir or REPORT_DIR, _OK_LOG, entry)


def report_error(
    code: str, post: Dict[str, Any], exc: Optional[Exception] = None, report_dir: Optional[str] = None
) -> None:
    """Log an error event.

    The string representation of ``exc`` is included when given.
    """
    entry = _entry(code, post)
    if exc is not None:
        entry["error"] = str(exc)
    print(f"[ERROR] {entry['message']} - {post.get('slug') or ''}")
    _write_jsonl(report_dir or REPORT_DIR, _ERROR_LOG, entry)
