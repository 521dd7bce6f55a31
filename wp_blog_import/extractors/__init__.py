"""
Extractors for WordPress export files.

This subpackage parses a WordPress XML (WXR) export into
:class:`~wp_blog_import.models.SourceItem` records.  Export format versions
1.0, 1.1 and 1.2 are recognised by their namespace.
"""

from .wordpress_extractor import WP_NAMESPACES, extract_items, load_export

__all__ = ["WP_NAMESPACES", "extract_items", "load_export"]
