"""
Blog importer hand-off.

This subpackage writes the intermediate document to a transient file and
runs the blog importer command on it.
"""

from .blog_importer import (
    CommandBlogImporter,
    build_importer,
    hand_off,
    importer_options,
)

__all__ = ["CommandBlogImporter", "build_importer", "hand_off", "importer_options"]
