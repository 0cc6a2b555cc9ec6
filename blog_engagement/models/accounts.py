"""
Author account counters for django-blog-engagement.
"""
from django.conf import settings
from django.core.exceptions import ObjectDoesNotExist
from django.db import models


class AuthorAccount(models.Model):
    """
    Per-user account info kept next to the auth user.

    total_posts counts the user's published blogs and total_reads sums the
    reads across all of them. Both are maintained as side effects of
    publishing and reading; authors never set them directly.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="account_info",
    )
    profile_img = models.URLField(max_length=500, blank=True)
    total_posts = models.PositiveIntegerField(default=0)
    total_reads = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Author Account"
        verbose_name_plural = "Author Accounts"

    def __str__(self):
        return f"Account info for {self.user}"

    @staticmethod
    def profile_for(user):
        """Return the public profile fields shown next to a blog."""
        try:
            profile_img = user.account_info.profile_img
        except ObjectDoesNotExist:
            profile_img = ""
        return {
            "username": user.get_username(),
            "fullname": user.get_full_name(),
            "profile_img": profile_img,
        }

    def to_dict(self):
        data = self.profile_for(self.user)
        data.update({
            "account_info": {
                "total_posts": self.total_posts,
                "total_reads": self.total_reads,
            },
            "joinedAt": self.created_at.isoformat() if self.created_at else None,
        })
        return data
