from .posts_writer import render_post, render_posts

__all__ = ["render_post", "render_posts"]
