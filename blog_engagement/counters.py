"""
Atomic counters over persisted rows.

Counters are changed with a single UPDATE using an F() expression, never by
loading the row, changing the attribute and saving it back. Concurrent
requests therefore cannot lose each other's updates.
"""
import logging

from django.db.models import F

from .exceptions import NotFoundError
from .models import AuthorAccount, Blog

logger = logging.getLogger(__name__)


def increment(model, field, delta, **lookup):
    """
    Add delta to model.field on the row matching lookup.

    delta may be negative or zero. Raises NotFoundError if no row matches.
    Returns the refreshed instance.
    """
    updated = model.objects.filter(**lookup).update(**{field: F(field) + delta})
    if not updated:
        raise NotFoundError(f"{str(model._meta.verbose_name).capitalize()} not found.")

    logger.debug("Incremented %s.%s by %d for %s", model.__name__, field, delta, lookup)
    return model.objects.get(**lookup)


def increment_blog(field, delta, **lookup):
    """Increment a Blog activity counter (total_reads or total_likes)."""
    return increment(Blog, field, delta, **lookup)


def increment_account(user_id, field, delta):
    """Increment an AuthorAccount counter (total_posts or total_reads)."""
    return increment(AuthorAccount, field, delta, user_id=user_id)
