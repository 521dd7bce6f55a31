"""
Hand-off of the intermediate document to the blog importer.

The blog importer is the task that persists posts from a ``<posts>``
document.  This module writes the document to a transient file, invokes
the importer with the run's options and removes the file afterwards,
whatever the importer's outcome.

:class:`CommandBlogImporter` runs the importer once as a command, passing
the options as ``--name=value`` arguments (``php symfony
apostrophe:blog-import`` by default).

Usage example::

    importer = build_importer({"type": "command"})
    hand_off(render_posts(result.posts), options, importer)
"""

from __future__ import annotations

import os
import subprocess
import tempfile
from typing import Any, Dict, List, Optional, Sequence

from wp_blog_import.models.import_post import ImportOptions
from wp_blog_import.utils.errors import ConfigurationError, ImportFailedError

DEFAULT_COMMAND = ["php", "symfony", "apostrophe:blog-import"]


def importer_options(options: ImportOptions, posts_path: str) -> Dict[str, Any]:
    """
    Build the option mapping forwarded to the blog importer.

    ``authors`` and ``defaultUsername`` are only included when set.

    :param options: Options of the run.
    :param posts_path: Location of the written ``<posts>`` document.
    :return: Importer option names mapped to their values.
    """
    forwarded: Dict[str, Any] = {
        "posts": posts_path,
        "env": options.env,
        "connection": options.connection,
        "clear": options.clear,
        "tag-to-entity": options.tag_to_entity,
        "skip-confirmation": options.skip_confirmation,
    }
    if options.authors is not None:
        forwarded["authors"] = options.authors
    if options.default_username is not None:
        forwarded["defaultUsername"] = options.default_username
    return forwarded


def command_arguments(forwarded: Dict[str, Any]) -> List[str]:
    """Render options as command arguments; flags appear only when true."""
    args: List[str] = []
    for name, value in forwarded.items():
        if isinstance(value, bool):
            if value:
                args.append(f"--{name}")
        elif value is not None:
            args.append(f"--{name}={value}")
    return args


class CommandBlogImporter:
    """Run the blog importer as an external command."""

    def __init__(self, command: Optional[Sequence[str]] = None, *, cwd: Optional[str] = None) -> None:
        self.command = list(command or DEFAULT_COMMAND)
        self.cwd = cwd

    def run(self, forwarded: Dict[str, Any]) -> subprocess.CompletedProcess:
        argv = self.command + command_arguments(forwarded)
        try:
            proc = subprocess.run(argv, cwd=self.cwd, check=False)
        except OSError as e:
            raise ImportFailedError(f"Could not start blog importer {argv[0]!r}: {e}") from e
        if proc.returncode != 0:
            raise ImportFailedError(f"Blog importer exited with status {proc.returncode}")
        return proc


def build_importer(cfg: Dict[str, Any]):
    """
    Create the importer backend described by the ``importer`` config section.

    :param cfg: Mapping with ``type`` (only ``command``), ``command`` and
        optionally ``cwd``.
    :raises ConfigurationError: for an unknown ``type``.
    """
    kind = cfg.get("type", "command")
    if kind == "command":
        return CommandBlogImporter(cfg.get("command"), cwd=cfg.get("cwd"))
    raise ConfigurationError(f"Unknown importer type {kind!r}")


def hand_off(document: str, options: ImportOptions, importer) -> Any:
    """
    Write ``document`` to a transient file and run ``importer`` on it.

    The transient file is removed once the importer returns or raises.

    :param document: The complete ``<posts>`` document.
    :param options: Options of the run, forwarded to the importer.
    :param importer: Any object with a ``run(forwarded_options)`` method.
    :return: Whatever the importer's ``run`` returns.
    """
    fd, posts_path = tempfile.mkstemp(prefix="wp-import-", suffix=".xml")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(document)
        return importer.run(importer_options(options, posts_path))
    finally:
        if os.path.exists(posts_path):
            os.unlink(posts_path)
