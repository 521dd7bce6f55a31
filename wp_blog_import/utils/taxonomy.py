from __future__ import annotations

from typing import Iterable, List, Tuple

from .escaping import PreEscaped

# Only the exact "tag" domain marks a tag; "post_tag" and others are ignored.
TAG_DOMAINS = ("tag",)
CATEGORY_DOMAIN = "category"


def _dedupe(names: Iterable[str]) -> List[PreEscaped]:
    """Drop repeated names, keeping first-seen order."""
    seen = set()
    result: List[PreEscaped] = []
    for name in names:
        if name in seen:
            continue
        seen.add(name)
        result.append(PreEscaped(name))
    return result


def classify_terms(
    terms: Iterable[Tuple[str, str]],
    *,
    categories_as_tags: bool = False,
    global_category: str = "",
) -> Tuple[List[PreEscaped], List[PreEscaped]]:
    """
    Split ``(domain, name)`` pairs from an export item into categories and tags.

    - With ``categories_as_tags`` every pair becomes a tag
    - Otherwise the ``tag`` domain becomes a tag, the ``category`` domain becomes a
      category and any other domain (``post_tag``, ``series``...) is ignored
    - ``global_category``, when set, is appended to the categories

    Names are kept as the pre-escaped text found in the export.  Returns
    ``(categories, tags)``, each de-duplicated with first-seen order preserved.
    """
    categories: List[str] = []
    tags: List[str] = []
    for domain, name in terms:
        if categories_as_tags or domain in TAG_DOMAINS:
            tags.append(name)
        elif domain == CATEGORY_DOMAIN:
            categories.append(name)
    if global_category:
        categories.append(global_category)
    return _dedupe(categories), _dedupe(tags)
