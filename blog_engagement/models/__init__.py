"""
Models for django-blog-engagement.

All models are importable from blog_engagement.models:

    from blog_engagement.models import Blog, Tag, AuthorAccount, Notification
"""
from .accounts import AuthorAccount
from .blogs import Tag, Blog
from .notifications import Notification

__all__ = [
    # Blogs
    "Tag",
    "Blog",
    # Authors
    "AuthorAccount",
    # Likes / notifications
    "Notification",
]
