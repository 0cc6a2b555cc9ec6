"""
Shared fixtures for django-blog-engagement tests.
"""
import pytest
from django.contrib.auth import get_user_model

from blog_engagement.models import Blog
from blog_engagement.publication import upsert_blog

User = get_user_model()

PUBLISHABLE = {
    "title": "Hello World",
    "description": "A first blog",
    "banner": "https://example.com/banner.png",
    "content": {"blocks": [{"type": "paragraph", "data": {"text": "Hi"}}]},
    "tags": ["Django", "python"],
}


@pytest.fixture
def author(db):
    """Create a test author."""
    return User.objects.create_user(
        username="author",
        email="author@example.com",
        password="testpass123",
        first_name="Ada",
        last_name="Author",
    )


@pytest.fixture
def reader(db):
    """Create a test reader."""
    return User.objects.create_user(
        username="reader",
        email="reader@example.com",
        password="testpass123",
    )


@pytest.fixture
def published_blog(db, author):
    """Create a published blog."""
    blog_id = upsert_blog(author, **PUBLISHABLE)
    return Blog.objects.get(blog_id=blog_id)


@pytest.fixture
def draft_blog(db, author):
    """Create a draft blog with only a title."""
    blog_id = upsert_blog(author, title="Work in progress", draft=True)
    return Blog.objects.get(blog_id=blog_id)
