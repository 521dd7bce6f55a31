from .post_transformer import DRAFT_NOTICE, EMPTY_TITLE_NOTICE, TransformResult, transform

__all__ = ["DRAFT_NOTICE", "EMPTY_TITLE_NOTICE", "TransformResult", "transform"]
