"""
High-level orchestration of the WordPress → blog import.

This module defines a :class:`WordPressImportTool` class that ties together
the extractor, transformer, writer and importer hand-off into a complete
run: read the export, filter and convert its posts, render the ``<posts>``
document and pass it to the blog importer (or write it to a file).

Configuration is supplied via a JSON file path or directly as a dictionary.
The ``importer`` section selects the importer backend; the ``reports``
section sets where logs and JSONL reports are written.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional, Tuple

from wp_blog_import.extractors.wordpress_extractor import extract_items
from wp_blog_import.migrators.blog_importer import DEFAULT_COMMAND, build_importer, hand_off
from wp_blog_import.models.import_post import ImportOptions
from wp_blog_import.transformers.post_transformer import TransformResult, transform
from wp_blog_import.utils.errors import (
    REPORT_DIR,
    ConfigurationError,
    ImportFailedError,
    report_error,
    report_ok,
    report_skip,
)
from wp_blog_import.writers.posts_writer import render_posts

MISSING_XML_MESSAGE = "Required option --xml=filename not given. Generate a Wordpress export XML file first."


class WordPressImportTool:
    """
    Encapsulates the configuration and steps of one import run.  Skipped
    items, written posts and importer failures are recorded using the
    :mod:`wp_blog_import.utils.errors` reports.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, *, config_file: Optional[str] = None) -> None:
        if config_file and os.path.exists(config_file):
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    config = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigurationError(f"Could not read configuration file {config_file}: {e}") from e
            if not isinstance(config, dict):
                raise ConfigurationError(f"Configuration file {config_file} must hold a JSON object")
        elif config is None:
            config = {}

        config.setdefault("importer", {})
        config["importer"].setdefault("type", "command")
        config["importer"].setdefault("command", list(DEFAULT_COMMAND))

        config.setdefault("reports", {})
        config["reports"].setdefault("dir", REPORT_DIR)

        self.config = config
        self.report_dir: str = config["reports"]["dir"]

    def log_message(self, message: str, level: str = "INFO") -> None:
        print(f"[{level}] {message}")
        os.makedirs(self.report_dir, exist_ok=True)
        with open(os.path.join(self.report_dir, "import.log"), "a", encoding="utf-8") as f:
            f.write(f"{level}: {message}\n")

    def convert(self, options: ImportOptions) -> Tuple[str, TransformResult]:
        """
        Read the export named by ``options.xml`` and render the import document.

        :raises ConfigurationError: if ``options.xml`` is not set.
        :raises ParseError: if the export cannot be read or parsed.
        :return: The document text and the transform result.
        """
        if not options.xml:
            raise ConfigurationError(MISSING_XML_MESSAGE)

        self.log_message(f"Reading WordPress export {options.xml}")
        items = extract_items(options.xml)
        result = transform(items, options)

        for notice in result.notices:
            self.log_message(notice, level="WARNING")
        for code, item in result.skipped:
            report_skip(code, {"slug": item.post_name, "title": item.title}, report_dir=self.report_dir)
        for post in result.posts:
            report_ok("POST_WRITTEN", {"slug": post.slug, "title": post.title}, report_dir=self.report_dir)

        counts = ", ".join(f"{code}={n}" for code, n in sorted(result.skip_counts().items()))
        self.log_message(
            f"{len(result.posts)} of {len(items)} items converted" + (f" (skipped: {counts})" if counts else ""),
        )
        return render_posts(result.posts), result

    def run(self, options: ImportOptions, importer=None) -> TransformResult:
        """
        Convert the export and hand the document to the blog importer.

        When ``options.output`` is set the document is written there and
        the importer is not called.

        :param options: Options of the run.
        :param importer: Importer backend; built from the ``importer``
            config section when omitted.
        :raises ImportFailedError: if the importer fails.
        """
        document, result = self.convert(options)

        if options.output:
            os.makedirs(os.path.dirname(options.output) or ".", exist_ok=True)
            with open(options.output, "w", encoding="utf-8") as f:
                f.write(document)
            self.log_message(f"Import document written to {options.output}")
            return result

        if importer is None:
            importer = build_importer(self.config["importer"])
        self.log_message(f"Handing {len(result.posts)} posts to the blog importer")
        try:
            hand_off(document, options, importer)
        except ImportFailedError as e:
            report_error("IMPORT_FAILED", {"slug": None, "title": options.xml}, e, report_dir=self.report_dir)
            raise
        self.log_message("Blog import finished.")
        return result
