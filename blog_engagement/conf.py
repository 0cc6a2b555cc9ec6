"""
Configuration settings for django-blog-engagement.

Override these in your Django settings.py:

    BLOG_ENGAGEMENT = {
        'LATEST_BLOGS_PER_PAGE': 10,
        'TOKEN_MAX_AGE': 60 * 60 * 24,
        ...
    }
"""
from django.conf import settings

DEFAULTS = {
    # Blog identifiers
    "BLOG_ID_SUFFIX_LENGTH": 21,
    "SLUG_MAX_LENGTH": 100,

    # Fetches made with this mode do not count as reads
    "EDIT_MODE": "edit",

    # Discovery
    "LATEST_BLOGS_PER_PAGE": 5,
    "TRENDING_BLOGS_LIMIT": 5,

    # Bearer tokens
    "TOKEN_SALT": "blog_engagement.access",
    "TOKEN_MAX_AGE": None,  # seconds, None never expires

    # Notifications
    "NOTIFICATION_TYPES": [
        ("like", "Like"),
    ],
}


class BlogEngagementSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from blog_engagement.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid blog_engagement setting: {name}")

        user_settings = getattr(settings, "BLOG_ENGAGEMENT", {})
        return user_settings.get(name, DEFAULTS[name])


blog_settings = BlogEngagementSettings()
