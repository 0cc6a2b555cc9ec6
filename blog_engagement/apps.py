"""Django app configuration for blog_engagement."""
from django.apps import AppConfig


class BlogEngagementConfig(AppConfig):
    """Configuration for the blog engagement app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "blog_engagement"
    verbose_name = "Blog Engagement"

    def ready(self):
        """Connect signal handlers."""
        from . import signals  # noqa: F401
