import xml.etree.ElementTree as ET

from wp_blog_import.models.import_post import SourceItem
from wp_blog_import.utils.errors import ParseError

# Tried in order; the first namespace an item has children in wins.
WP_NAMESPACES = (
    "http://wordpress.org/export/1.0/",
    "http://wordpress.org/export/1.1/",
    "http://wordpress.org/export/1.2/",
)
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
CONTENT_NAMESPACE = "http://purl.org/rss/1.0/modules/content/"


def load_export(file_path):
    """Parse a WordPress export file and return its ``<channel>`` element.

    Args:
        file_path (str): Path to the XML export.

    Returns:
        xml.etree.ElementTree.Element: The first ``<channel>`` of the document.

    Raises:
        ParseError: If the file cannot be read, is not well-formed XML or has
            no ``<channel>``.
    """
    try:
        tree = ET.parse(file_path)
    except (OSError, ET.ParseError) as e:
        raise ParseError(f"Unable to open or parse XML file {file_path}: {e}") from e
    channel = tree.getroot().find("channel")
    if channel is None:
        raise ParseError(f"No <channel> element in {file_path}")
    return channel


def find_wp_namespace(item):
    """Return the WordPress export namespace used by ``item``, or ``None``."""
    for namespace in WP_NAMESPACES:
        if any(child.tag.startswith("{" + namespace + "}") for child in item):
            return namespace
    return None


def _text(element):
    if element is None or element.text is None:
        return ""
    return element.text


def item_to_source(item):
    """Read one ``<item>`` element into a :class:`SourceItem`."""
    wp = "{" + (find_wp_namespace(item) or WP_NAMESPACES[-1]) + "}"

    def wp_text(name):
        return _text(item.find(wp + name))

    postmeta = [
        (_text(meta.find(wp + "meta_key")), _text(meta.find(wp + "meta_value")))
        for meta in item.findall(wp + "postmeta")
    ]
    categories = [(cat.get("domain", ""), _text(cat)) for cat in item.findall("category")]

    return SourceItem(
        post_type=wp_text("post_type"),
        post_parent=wp_text("post_parent"),
        title=_text(item.find("title")),
        post_date=wp_text("post_date"),
        post_name=wp_text("post_name"),
        status=wp_text("status"),
        link=_text(item.find("link")),
        creator=_text(item.find("{%s}creator" % DC_NAMESPACE)),
        content=_text(item.find("{%s}encoded" % CONTENT_NAMESPACE)),
        post_id=wp_text("post_id"),
        guid=_text(item.find("guid")),
        categories=categories,
        postmeta=postmeta,
    )


def extract_items(file_path):
    """Extract every ``<item>`` of a WordPress export, in document order.

    Args:
        file_path (str): Path to the XML export.

    Returns:
        list: A list of :class:`SourceItem`, one per item, unfiltered.

    Raises:
        ParseError: If the export cannot be loaded.
    """
    channel = load_export(file_path)
    return [item_to_source(item) for item in channel.findall("item")]
