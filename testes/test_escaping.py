import os
import sys

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wp_blog_import.utils.escaping import PreEscaped, escape, paragraph_breaks


def test_escape_markup_characters():
    assert escape("a & b < c > d \"e\" 'f'") == "a &amp; b &lt; c &gt; d &quot;e&quot; &#x27;f&#x27;"


def test_escape_double_encodes_existing_entities():
    assert escape("Tom &amp; Jerry") == "Tom &amp;amp; Jerry"


def test_escape_pre_escaped_fragment_is_untouched():
    fragment = PreEscaped("News &amp; Views")
    assert escape(fragment) == "News &amp; Views"
    assert escape(escape(fragment)) == "News &amp; Views"


def test_escape_bytes_and_none():
    assert escape("café <b>".encode("utf-8")) == "café &lt;b&gt;"
    assert escape(None) == ""


def test_blank_lines_become_escaped_breaks():
    expected = "A\r\n&lt;br /&gt;&lt;br /&gt;\r\nB"
    assert paragraph_breaks("A\n\nB") == expected
    assert paragraph_breaks("A\r\n\r\nB") == expected


def test_single_line_breaks_are_kept():
    assert paragraph_breaks("A\nB\r\nC") == "A\nB\r\nC"
