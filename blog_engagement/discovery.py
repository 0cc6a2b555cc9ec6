"""
Listings of published blogs.
"""
from django.core.paginator import EmptyPage, PageNotAnInteger, Paginator

from .conf import blog_settings
from .models import Blog


def published_blogs():
    return (
        Blog.objects.filter(draft=False)
        .select_related("author", "author__account_info")
        .prefetch_related("tags")
    )


def latest_blogs(page=1):
    """Return one page of published blogs, newest first."""
    paginator = Paginator(
        published_blogs().order_by("-published_at", "-pk"),
        blog_settings.LATEST_BLOGS_PER_PAGE,
    )
    try:
        return list(paginator.page(page).object_list)
    except (EmptyPage, PageNotAnInteger):
        return []


def count_published():
    return Blog.objects.filter(draft=False).count()


def trending_blogs():
    """Return the most read, then most liked, published blogs."""
    qs = published_blogs().order_by("-total_reads", "-total_likes", "-published_at")
    return list(qs[:blog_settings.TRENDING_BLOGS_LIMIT])
