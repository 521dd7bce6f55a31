from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wp_blog_import.utils.escaping import PreEscaped


class ImportOptions(BaseModel):
    """Options of a single import run.

    Aliases are the command-line option names, so the options forwarded to
    the blog importer keep the names it expects.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    env: str = "dev"
    connection: str = "doctrine"
    xml: Optional[str] = None
    authors: Optional[str] = None
    clear: bool = False
    ignore_empty_title: bool = Field(False, alias="ignore-empty-title")
    disqus: bool = False
    default_username: Optional[str] = Field("admin", alias="defaultUsername")
    category: str = "admin"
    categories_as_tags: bool = Field(False, alias="categories-as-tags")
    tag_to_entity: bool = Field(False, alias="tag-to-entity")
    skip_confirmation: bool = Field(False, alias="skip-confirmation")
    output: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def _none_category(cls, v: Any):
        return "" if v is None else v


class SourceItem(BaseModel):
    """One ``<item>`` of a WordPress export, with missing fields read as empty."""

    post_type: str = ""
    post_parent: int = 0
    title: str = ""
    post_date: str = ""
    post_name: str = ""
    status: str = ""
    link: str = ""
    creator: str = ""
    content: str = ""
    post_id: str = ""
    guid: str = ""
    categories: list[tuple[str, str]] = Field(default_factory=list)
    postmeta: list[tuple[str, str]] = Field(default_factory=list)

    @field_validator("post_parent", mode="before")
    @classmethod
    def _parent_as_int(cls, v: Any):
        # WordPress writes 0 for top-level items; anything unreadable counts as top-level.
        if isinstance(v, int):
            return v
        try:
            return int(str(v).strip())
        except (TypeError, ValueError):
            return 0

    @field_validator(
        "post_type", "title", "post_date", "post_name", "status", "link", "creator", "content", "post_id", "guid",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, v: Any):
        return "" if v is None else v


class ImportPost(BaseModel):
    """A post ready for the import document.

    Text fields hold escaped markup; ``categories`` and ``tags`` hold the
    pre-escaped names found in the export.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    disqus_thread_identifier: Optional[str] = None
    published_at: str = ""
    slug: str = ""
    title: str = ""
    author: str = ""
    link: str = ""
    location: Optional[str] = None
    categories: list[PreEscaped] = Field(default_factory=list)
    tags: list[PreEscaped] = Field(default_factory=list)
    body: str = ""

    @field_validator("categories", "tags", mode="before")
    @classmethod
    def _pre_escaped(cls, v: Any):
        return [PreEscaped(item) for item in (v or [])]
