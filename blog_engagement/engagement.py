"""
Reader engagement: reads and likes.

record_view() counts a read for a blog and its author before deciding
whether the caller may see the blog. toggle_like() applies the state the
caller asks for and keeps the like ledger and total_likes in step.

The ledger write and the counter update are two separate statements. A crash
between them can leave total_likes off by one until the next change; there
is no transaction spanning both.
"""
import enum
import logging

from django.db import DatabaseError, transaction

from .conf import blog_settings
from .counters import increment_account, increment_blog
from .exceptions import AccessDenied, NotFoundError
from .models import Blog, Notification

logger = logging.getLogger(__name__)


class LikeCommand(enum.Enum):
    LIKE = "like"
    UNLIKE = "unlike"

    @classmethod
    def from_wanted_state(cls, want_liked):
        return cls.LIKE if want_liked else cls.UNLIKE


def record_view(blog_id, mode=None, draft=False):
    """
    Count a read of the blog and return it.

    Fetches in edit mode are free. The author's total_reads moves with the
    blog's. Raises NotFoundError for an unknown blog, and AccessDenied when
    the blog is a draft and draft access was not asked for; the read is
    counted in that case too.
    """
    delta = 0 if mode == blog_settings.EDIT_MODE else 1

    blog = increment_blog("total_reads", delta, blog_id=blog_id)

    if delta:
        try:
            with transaction.atomic():
                increment_account(blog.author_id, "total_reads", delta)
        except (NotFoundError, DatabaseError):
            logger.exception("Failed to update total_reads for author of blog %s", blog_id)

    if blog.draft and not draft:
        raise AccessDenied()

    return blog


def _get_blog(blog_pk):
    try:
        return Blog.objects.get(pk=blog_pk)
    except (Blog.DoesNotExist, ValueError, TypeError):
        raise NotFoundError("Blog not found.")


def is_liked(user, blog_pk):
    """Return True if user likes the blog with primary key blog_pk."""
    try:
        blog = _get_blog(blog_pk)
    except NotFoundError:
        return False
    return Notification.is_liked(user, blog)


def toggle_like(user, blog_pk, want_liked):
    """
    Set whether user likes the blog and return the resulting state.

    want_liked is the state the client wants to end up in, not a request to
    flip the current one. Asking for the current state again changes
    nothing.

    total_likes is gated on the ledger: it moves by one only when a like row
    was actually inserted or deleted, never on the request alone. Repeated or
    concurrent duplicate requests leave it untouched, so total_likes always
    equals the number of like rows for the blog.
    """
    blog = _get_blog(blog_pk)
    command = LikeCommand.from_wanted_state(want_liked)

    if command is LikeCommand.LIKE:
        if Notification.record_like(user, blog):
            increment_blog("total_likes", 1, pk=blog.pk)
    else:
        if Notification.remove_like(user, blog):
            increment_blog("total_likes", -1, pk=blog.pk)

    return command is LikeCommand.LIKE
