"""
Serialization of the intermediate ``<posts>`` document read by the blog
importer.

Every :class:`ImportPost` already holds escaped text, so the writer inserts
values verbatim.  The body goes into the fixed ``Page/Area/Slot/value``
shape the importer expects, as a ``foreignHtml`` slot of the ``blog-body``
area.
"""

from __future__ import annotations

from typing import Iterable, List

from wp_blog_import.models.import_post import ImportPost

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
BODY_AREA = "blog-body"
BODY_SLOT_TYPE = "foreignHtml"


def _post_attributes(post: ImportPost) -> str:
    attrs = []
    if post.disqus_thread_identifier is not None:
        attrs.append(f'disqus_thread_identifier="{post.disqus_thread_identifier}"')
    attrs.append(f'published_at="{post.published_at}"')
    attrs.append(f'slug="{post.slug}"')
    return " ".join(attrs)


def render_post(post: ImportPost) -> List[str]:
    """Return the lines of one ``<post>`` block."""
    lines = [
        f"  <post {_post_attributes(post)}>",
        f"    <title>{post.title}</title>",
        f"    <author>{post.author}</author>",
    ]
    if post.location is not None:
        lines.append(f"    <location>{post.location}</location>")
    lines.append("    <categories>")
    lines.extend(f"      <category>{category}</category>" for category in post.categories)
    lines.append("    </categories>")
    lines.append("    <tags>")
    lines.extend(f"      <tag>{tag}</tag>" for tag in post.tags)
    lines.append("    </tags>")
    lines.extend([
        "    <Page>",
        f'      <Area name="{BODY_AREA}">',
        f'        <Slot type="{BODY_SLOT_TYPE}">',
        f"          <value>{post.body}</value>",
        "        </Slot>",
        "      </Area>",
        "    </Page>",
        "  </post>",
    ])
    return lines


def render_posts(posts: Iterable[ImportPost]) -> str:
    """Render the complete import document, an empty ``<posts>`` when there is nothing to import."""
    lines = [XML_DECLARATION, "<posts>"]
    for post in posts:
        lines.extend(render_post(post))
    lines.append("</posts>")
    return "\n".join(lines) + "\n"
