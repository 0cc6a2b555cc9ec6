"""
Draft/published workflow for blogs.

A blog is either a draft or published. Drafts can be saved with nothing but
a title. Creating a blog directly as published requires every field a reader
needs: title, description, banner, at least one content block and at least
one tag. The first missing field, in that order, is reported.

Publishing also keeps the author's total_posts in step with the number of
published blogs they own.
"""
import logging

from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone
from django.utils.crypto import get_random_string
from django.utils.text import slugify

from .conf import blog_settings
from .counters import increment_account
from .exceptions import ConflictError, NotFoundError, ValidationError
from .models import Blog, Tag

logger = logging.getLogger(__name__)

MISSING_FIELD_MESSAGES = {
    "title": "you must provide blog title.",
    "description": "you must provide blog description.",
    "banner": "you must provide blog banner.",
    "content": "you must provide blog content",
    "tags": "you must provide tags",
}


def random_suffix():
    """Return the random part of a generated blog_id."""
    return get_random_string(blog_settings.BLOG_ID_SUFFIX_LENGTH)


def generate_blog_id(title):
    """Build a blog_id from the title slug plus a random suffix."""
    return slugify(title)[:blog_settings.SLUG_MAX_LENGTH] + random_suffix()


def normalize_tags(tags):
    """
    Lowercase and deduplicate tag names, keeping their order.

    Blank names are dropped.
    """
    if tags is None:
        return []
    if isinstance(tags, str) or not isinstance(tags, (list, tuple)):
        raise ValidationError("tags must be a list of strings.", field="tags")

    names = []
    for tag in tags:
        if not isinstance(tag, str):
            raise ValidationError("tags must be a list of strings.", field="tags")
        name = tag.strip().lower()
        if name and name not in names:
            names.append(name)
    return names


def has_content_blocks(content):
    return isinstance(content, dict) and bool(content.get("blocks"))


def _require(field, present):
    if not present:
        raise ValidationError(MISSING_FIELD_MESSAGES[field], field=field)


def check_publishable(*, title, description, banner, content, tags):
    """Raise ValidationError naming the first field a published blog is missing."""
    _require("title", title)
    _require("description", description)
    _require("banner", banner)
    _require("content", has_content_blocks(content))
    _require("tags", tags)


def _set_tags(blog, names):
    # Tags are looked up by name only; slugs are not unique
    blog.tags.set([Tag.objects.get_or_create(name=name)[0] for name in names])


def _adjust_post_count(author, delta):
    """
    Move the author's total_posts by delta.

    The blog itself is already saved; a failure here is logged and the blog
    stays as it is.
    """
    if not delta:
        return
    try:
        with transaction.atomic():
            increment_account(author.pk, "total_posts", delta)
    except (NotFoundError, DatabaseError):
        logger.exception("Failed to update total_posts for user %s", author.pk)


def upsert_blog(author, *, title="", description="", banner="", content=None,
                tags=None, draft=None, blog_id=None):
    """
    Create a blog, or update one of author's blogs when blog_id is given.

    Returns the blog_id.
    """
    title = title.strip() if isinstance(title, str) else ""
    content = content if content is not None else {}
    tags = normalize_tags(tags)
    draft = bool(draft)

    _require("title", title)

    if blog_id:
        return _update_blog(
            author,
            blog_id,
            title=title,
            description=description or "",
            banner=banner or "",
            content=content,
            tags=tags,
            draft=draft,
        )

    if not draft:
        check_publishable(
            title=title,
            description=description,
            banner=banner,
            content=content,
            tags=tags,
        )

    blog = Blog(
        blog_id=generate_blog_id(title),
        title=title,
        description=description or "",
        banner=banner or "",
        content=content,
        author=author,
        draft=draft,
    )
    with transaction.atomic():
        # blog_id is the only unique column a new blog row can collide on
        try:
            with transaction.atomic():
                blog.save()
        except IntegrityError:
            raise ConflictError(f"Blog id {blog.blog_id} already exists.")
        _set_tags(blog, tags)

    logger.info(
        "Blog created.",
        extra={"blog_id": blog.blog_id, "author_id": author.pk, "draft": draft},
    )

    _adjust_post_count(author, 0 if draft else 1)
    return blog.blog_id


def _update_blog(author, blog_id, *, title, description, banner, content, tags, draft):
    try:
        blog = Blog.objects.get(blog_id=blog_id, author=author)
    except Blog.DoesNotExist:
        raise NotFoundError("Blog not found.")

    blog.title = title
    blog.description = description
    blog.banner = banner
    blog.content = content

    with transaction.atomic():
        blog.save(update_fields=["title", "description", "banner", "content", "updated_at"])
        _set_tags(blog, tags)

        # Only the request that actually flips the flag moves total_posts
        transitioned = Blog.objects.filter(pk=blog.pk).exclude(draft=draft).update(draft=draft)
        if not draft:
            Blog.objects.filter(pk=blog.pk, published_at__isnull=True).update(
                published_at=timezone.now()
            )

    if transitioned:
        logger.info(
            "Blog %s.",
            "unpublished" if draft else "published",
            extra={"blog_id": blog.blog_id, "author_id": author.pk},
        )
        _adjust_post_count(author, -1 if draft else 1)

    return blog.blog_id
