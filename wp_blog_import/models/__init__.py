from .import_post import ImportOptions, ImportPost, SourceItem

__all__ = ["ImportOptions", "ImportPost", "SourceItem"]
