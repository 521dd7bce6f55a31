"""
Entry point for the WordPress → blog import tool.

Usage::

    python main.py --xml=wordpress-export-file.xml [--disqus]
"""

import argparse
import sys

from wp_blog_import.import_tool import WordPressImportTool
from wp_blog_import.models.import_post import ImportOptions
from wp_blog_import.utils.errors import ConfigurationError, ImportFailedError, ParseError

CONFIG_FILE = "config/import_config.json"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Imports a blog from a Wordpress XML export.",
    )
    parser.add_argument("--env", default="dev", help="The environment")
    parser.add_argument("--connection", default="doctrine", help="The connection name")
    parser.add_argument("--xml", default=None, help="An XML file created by the Wordpress export feature")
    parser.add_argument("--authors", default=None, help="An author mapping XML file (see the blog importer)")
    parser.add_argument("--clear", action="store_true", help="Remove existing posts")
    parser.add_argument("--ignore-empty-title", action="store_true", help="Ignore all posts with empty titles")
    parser.add_argument("--disqus", action="store_true", help="Import existing Disqus threads")
    parser.add_argument("--defaultUsername", default="admin", help="Default author of posts")
    parser.add_argument("--category", default="admin", help="Category to apply to ALL imported posts")
    parser.add_argument(
        "--categories-as-tags", action="store_true", help="All categories found in the import are treated as tags"
    )
    parser.add_argument(
        "--tag-to-entity",
        action="store_true",
        help="Convert tags to entity relationships if an entity by that name exists (applied after categories-as-tags)",
    )
    parser.add_argument("--skip-confirmation", action="store_true", help="Skip confirmation prompt")
    parser.add_argument("--output", default=None, help="Write the import document here instead of importing it")
    parser.add_argument("--config", default=CONFIG_FILE, help="JSON configuration file")
    return parser.parse_args(argv)


def options_from_args(args: argparse.Namespace) -> ImportOptions:
    return ImportOptions(
        env=args.env,
        connection=args.connection,
        xml=args.xml,
        authors=args.authors,
        clear=args.clear,
        ignore_empty_title=args.ignore_empty_title,
        disqus=args.disqus,
        default_username=args.defaultUsername,
        category=args.category,
        categories_as_tags=args.categories_as_tags,
        tag_to_entity=args.tag_to_entity,
        skip_confirmation=args.skip_confirmation,
        output=args.output,
    )


def main(argv=None) -> int:
    """
    Run one import and return the process exit status.
    """
    args = parse_args(argv)
    options = options_from_args(args)

    try:
        tool = WordPressImportTool(config_file=args.config)
    except ConfigurationError as e:
        print(e)
        return 1

    try:
        tool.run(options)
    except ConfigurationError as e:
        print(e)
        return 1
    except ParseError as e:
        print("Unable to open or parse XML file")
        tool.log_message(str(e), level="ERROR")
        return 1
    except ImportFailedError as e:
        tool.log_message(str(e), level="ERROR")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
