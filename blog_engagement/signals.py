"""
Signal handlers for django-blog-engagement.
"""
from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import AuthorAccount


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_author_account(sender, instance, created, **kwargs):
    """Give every new user an AuthorAccount with zeroed counters."""
    if created:
        AuthorAccount.objects.get_or_create(user=instance)
