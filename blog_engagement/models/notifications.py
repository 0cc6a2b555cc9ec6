"""
Notification model for django-blog-engagement.

A "like" notification is also the ledger entry proving that a user liked a
blog: the row exists exactly while the like stands.
"""
import logging

from django.conf import settings
from django.db import models

from ..conf import blog_settings

logger = logging.getLogger(__name__)


class Notification(models.Model):
    """
    Notification delivered to a blog's author.

    At most one notification of each type exists per (user, blog); the
    database enforces it.
    """

    LIKE = "like"

    TYPE_CHOICES = blog_settings.NOTIFICATION_TYPES

    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=LIKE)
    blog = models.ForeignKey(
        "blog_engagement.Blog",
        on_delete=models.CASCADE,
        related_name="notifications",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_blog_notifications",
        help_text="User whose action produced the notification",
    )
    notification_for = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blog_notifications",
        help_text="Author who receives the notification",
    )
    seen = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "blog", "type"],
                name="unique_notification_per_user_blog_type",
            ),
        ]
        indexes = [
            models.Index(fields=["notification_for", "seen", "-created_at"]),
        ]

    def __str__(self):
        return f"{self.user} {self.type}d {self.blog}"

    @classmethod
    def is_liked(cls, user, blog):
        """Return True if user currently likes blog."""
        return cls.objects.filter(user=user, blog=blog, type=cls.LIKE).exists()

    @classmethod
    def record_like(cls, user, blog):
        """
        Record that user likes blog.

        Liking an already liked blog is a no-op. Concurrent identical calls
        settle on a single row: get_or_create retries the lookup when the
        unique constraint rejects the second insert.

        Returns True if a new like was written.
        """
        _, created = cls.objects.get_or_create(
            user=user,
            blog=blog,
            type=cls.LIKE,
            defaults={"notification_for_id": blog.author_id},
        )
        logger.debug(
            "Like by user %s on blog %s %s",
            user.pk, blog.blog_id, "recorded" if created else "already present",
        )
        return created

    @classmethod
    def remove_like(cls, user, blog):
        """
        Remove user's like from blog, if any.

        Returns True if a like was removed.
        """
        deleted, _ = cls.objects.filter(user=user, blog=blog, type=cls.LIKE).delete()
        logger.debug("Removed %d like(s) by user %s on blog %s", deleted, user.pk, blog.blog_id)
        return bool(deleted)

    def mark_seen(self):
        self.seen = True
        self.save(update_fields=["seen"])
