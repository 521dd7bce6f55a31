"""
Top-level package for the WordPress → blog import utility.

This package converts a WordPress XML export into the ``<posts>`` document
read by the blog importer and hands the document over.  Modules are split
into subpackages:

* :mod:`wp_blog_import.extractors` – read WordPress export items
* :mod:`wp_blog_import.transformers` – filter items and extract post fields
* :mod:`wp_blog_import.writers` – render the ``<posts>`` document
* :mod:`wp_blog_import.migrators` – hand the document to the blog importer
* :mod:`wp_blog_import.models` – option, source item and post models
* :mod:`wp_blog_import.utils` – escaping, taxonomy, errors and run reports

Orchestration is handled in :mod:`wp_blog_import.import_tool`.
"""
