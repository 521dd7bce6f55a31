"""
Filtering and field extraction for WordPress export items.

:func:`transform` walks the items of an export once.  Each item goes through
a fixed chain of filters; the first filter that rejects it skips the item.
Items that pass every filter become :class:`ImportPost` records holding
escaped text ready for :mod:`wp_blog_import.writers.posts_writer`.

One-time diagnostics (the empty-title and draft notices) and the skipped
items are returned in the :class:`TransformResult` instead of being printed.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from wp_blog_import.models.import_post import ImportOptions, ImportPost, SourceItem
from wp_blog_import.utils.escaping import escape, paragraph_breaks
from wp_blog_import.utils.taxonomy import classify_terms

EMPTY_TITLE_NOTICE = "Ignoring posts with empty titles"
DRAFT_NOTICE = "WARNING: unpublished drafts are not imported"

GEO_LATITUDE_KEY = "_wp_geo_latitude"
GEO_LONGITUDE_KEY = "_wp_geo_longitude"


@dataclass
class TransformResult:
    posts: List[ImportPost] = field(default_factory=list)
    notices: List[str] = field(default_factory=list)
    skipped: List[Tuple[str, SourceItem]] = field(default_factory=list)

    def notice(self, message: str) -> None:
        if message not in self.notices:
            self.notices.append(message)

    def skip_counts(self) -> Counter:
        return Counter(code for code, _ in self.skipped)


def skip_reason(item: SourceItem, options: ImportOptions) -> Optional[str]:
    """Return the code of the first filter rejecting ``item``, or ``None``."""
    if item.post_type != "post":
        return "NOT_A_POST"
    # Attachments and revisions hang off a parent post.
    if item.post_parent > 0:
        return "CHILD_POST"
    if options.ignore_empty_title and item.title == "":
        return "EMPTY_TITLE"
    if item.status == "draft":
        return "DRAFT"
    return None


def geo_location(postmeta: Iterable[Tuple[str, str]]) -> Optional[str]:
    """Compose ``"<lat>, <lon>"`` from one item's geo metadata, if both are present."""
    latitude = longitude = None
    for key, value in postmeta:
        if key == GEO_LATITUDE_KEY:
            latitude = value
        elif key == GEO_LONGITUDE_KEY:
            longitude = value
    if latitude is None or longitude is None:
        return None
    return f"{latitude}, {longitude}"


def build_post(item: SourceItem, options: ImportOptions) -> ImportPost:
    """Extract the import fields of an item that passed the filters."""
    categories, tags = classify_terms(
        item.categories,
        categories_as_tags=options.categories_as_tags,
        global_category=options.category,
    )
    location = geo_location(item.postmeta)
    thread_identifier = None
    if options.disqus:
        # Identifier format of the standard WordPress Disqus plugin.
        thread_identifier = escape(f"{item.post_id} {item.guid}")

    return ImportPost(
        disqus_thread_identifier=thread_identifier,
        published_at=escape(item.post_date),
        slug=escape(item.post_name),
        title=escape(item.title),
        author=escape(item.creator),
        link=escape(item.link),
        location=escape(location) if location is not None else None,
        categories=categories,
        tags=tags,
        body=paragraph_breaks(escape(item.content)),
    )


def transform(items: Iterable[SourceItem], options: ImportOptions) -> TransformResult:
    """Filter and convert export items in a single pass.

    :param items: Source items in document order.
    :param options: Options of the run.
    :return: A :class:`TransformResult` with the accepted posts in source
        order, the one-time notices and every skipped item with its reason.
    """
    result = TransformResult()
    for item in items:
        reason = skip_reason(item, options)
        if reason == "EMPTY_TITLE":
            result.notice(EMPTY_TITLE_NOTICE)
        elif reason == "DRAFT":
            result.notice(DRAFT_NOTICE)
        if reason is not None:
            result.skipped.append((reason, item))
            continue
        result.posts.append(build_post(item, options))
    return result
