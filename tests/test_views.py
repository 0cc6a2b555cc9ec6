"""
Tests for the JSON API.
"""
import json

import pytest
from django.core import signing
from django.urls import reverse

from blog_engagement.auth import issue_access_token
from blog_engagement.models import AuthorAccount, Blog, Notification
from blog_engagement.publication import upsert_blog

from .conftest import PUBLISHABLE


def post_json(client, name, data=None, token=None):
    headers = {}
    if token:
        headers["HTTP_AUTHORIZATION"] = f"Bearer {token}"
    return client.post(
        reverse(f"blog_engagement:{name}"),
        data=json.dumps(data or {}),
        content_type="application/json",
        **headers,
    )


@pytest.fixture
def author_token(author):
    return issue_access_token(author)


@pytest.fixture
def reader_token(reader):
    return issue_access_token(reader)


class TestAuth:
    """Tests for bearer-token checks."""

    def test_missing_token(self, client, db):
        response = post_json(client, "create_blog", PUBLISHABLE)
        assert response.status_code == 401
        assert response.json() == {"error": "Access denied!"}

    def test_invalid_token(self, client, db):
        response = post_json(client, "create_blog", PUBLISHABLE, token="forged")
        assert response.status_code == 403
        assert response.json() == {"error": "Access token is invalid"}

    def test_token_for_unknown_user(self, client, db):
        token = signing.dumps({"id": 424242}, salt="blog_engagement.access")
        response = post_json(client, "like_blog", {"_id": 1}, token=token)
        assert response.status_code == 403

    def test_token_with_wrong_salt(self, client, author):
        token = signing.dumps({"id": author.pk}, salt="something-else")
        response = post_json(client, "isliked_by_user", {"_id": 1}, token=token)
        assert response.status_code == 403


class TestCreateBlog:
    """Tests for the create-blog endpoint."""

    def test_create(self, client, author, author_token):
        response = post_json(client, "create_blog", PUBLISHABLE, token=author_token)

        assert response.status_code == 200
        blog = Blog.objects.get(blog_id=response.json()["id"])
        assert blog.author == author
        assert AuthorAccount.objects.get(user=author).total_posts == 1

    def test_validation_error(self, client, author_token):
        data = {**PUBLISHABLE, "banner": ""}
        response = post_json(client, "create_blog", data, token=author_token)

        assert response.status_code == 400
        assert response.json() == {"error": "you must provide blog banner."}

    def test_update(self, client, author, author_token, draft_blog):
        data = {**PUBLISHABLE, "blogId": draft_blog.blog_id, "draft": False}
        response = post_json(client, "create_blog", data, token=author_token)

        assert response.json() == {"id": draft_blog.blog_id}
        draft_blog.refresh_from_db()
        assert not draft_blog.draft

    def test_update_with_tag_sharing_a_slug(self, client, author_token, draft_blog):
        """Test "c#" is accepted after "c++" exists."""
        post_json(client, "create_blog", {**PUBLISHABLE, "tags": ["c++"]}, token=author_token)

        data = {"title": "Draft", "blogId": draft_blog.blog_id, "draft": True, "tags": ["c#"]}
        response = post_json(client, "create_blog", data, token=author_token)

        assert response.status_code == 200
        draft_blog.refresh_from_db()
        assert draft_blog.tag_names == ["c#"]

    def test_update_someone_elses_blog(self, client, reader_token, published_blog):
        data = {"title": "Mine", "blogId": published_blog.blog_id}
        response = post_json(client, "create_blog", data, token=reader_token)
        assert response.status_code == 404

    def test_conflict(self, client, author_token, monkeypatch):
        monkeypatch.setattr("blog_engagement.publication.random_suffix", lambda: "fixed")
        data = {"title": "Twice", "draft": True}
        assert post_json(client, "create_blog", data, token=author_token).status_code == 200

        response = post_json(client, "create_blog", data, token=author_token)
        assert response.status_code == 409
        assert "error" in response.json()

    def test_malformed_json(self, client, author_token):
        response = client.post(
            reverse("blog_engagement:create_blog"),
            data="{not json",
            content_type="application/json",
            HTTP_AUTHORIZATION=f"Bearer {author_token}",
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Malformed JSON body."}

    def test_get_not_allowed(self, client, author_token):
        response = client.get(
            reverse("blog_engagement:create_blog"),
            HTTP_AUTHORIZATION=f"Bearer {author_token}",
        )
        assert response.status_code == 405


class TestGetBlog:
    """Tests for the get-blog endpoint."""

    def test_get_blog(self, client, author, published_blog):
        response = post_json(client, "get_blog", {"blogId": published_blog.blog_id})

        assert response.status_code == 200
        blog = response.json()["blog"]
        assert blog["blog_id"] == published_blog.blog_id
        assert blog["activity"]["total_reads"] == 1
        assert blog["author"]["username"] == "author"
        assert AuthorAccount.objects.get(user=author).total_reads == 1

    def test_edit_mode(self, client, published_blog):
        data = {"blogId": published_blog.blog_id, "mode": "edit"}
        response = post_json(client, "get_blog", data)
        assert response.json()["blog"]["activity"]["total_reads"] == 0

    def test_draft_forbidden(self, client, draft_blog):
        response = post_json(client, "get_blog", {"blogId": draft_blog.blog_id})
        assert response.status_code == 403
        assert response.json() == {"error": "you can not access draft blogs."}

    def test_draft_allowed(self, client, draft_blog):
        data = {"blogId": draft_blog.blog_id, "draft": True, "mode": "edit"}
        response = post_json(client, "get_blog", data)
        assert response.status_code == 200
        assert response.json()["blog"]["draft"] is True

    def test_unknown_blog(self, client, db):
        response = post_json(client, "get_blog", {"blogId": "missing"})
        assert response.status_code == 404

    def test_missing_blog_id(self, client, db):
        response = post_json(client, "get_blog", {})
        assert response.status_code == 400


class TestLikes:
    """Tests for like-blog and isliked-by-user."""

    def test_like_flow(self, client, reader_token, published_blog):
        data = {"_id": published_blog.pk}
        assert post_json(client, "isliked_by_user", data, token=reader_token).json() is False

        response = post_json(
            client, "like_blog", {**data, "isLikedByUser": True}, token=reader_token
        )
        assert response.json() == {"likedByUser": True}
        assert post_json(client, "isliked_by_user", data, token=reader_token).json() is True

        response = post_json(
            client, "like_blog", {**data, "isLikedByUser": False}, token=reader_token
        )
        assert response.json() == {"likedByUser": False}
        assert post_json(client, "isliked_by_user", data, token=reader_token).json() is False

        published_blog.refresh_from_db()
        assert published_blog.total_likes == 0

    def test_like_twice(self, client, reader, reader_token, published_blog):
        data = {"_id": published_blog.pk, "isLikedByUser": True}
        post_json(client, "like_blog", data, token=reader_token)
        post_json(client, "like_blog", data, token=reader_token)

        assert Notification.objects.filter(user=reader).count() == 1
        published_blog.refresh_from_db()
        assert published_blog.total_likes == 1

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_like_requires_boolean(self, client, reader, reader_token, published_blog, value):
        """Test only JSON booleans are accepted for isLikedByUser."""
        data = {"_id": published_blog.pk, "isLikedByUser": value}
        response = post_json(client, "like_blog", data, token=reader_token)

        assert response.status_code == 400
        assert response.json() == {"error": "isLikedByUser must be a boolean."}
        assert not Notification.objects.filter(user=reader).exists()
        published_blog.refresh_from_db()
        assert published_blog.total_likes == 0

    def test_like_missing_state(self, client, reader_token, published_blog):
        response = post_json(client, "like_blog", {"_id": published_blog.pk}, token=reader_token)
        assert response.status_code == 400

    def test_like_unknown_blog(self, client, reader_token):
        data = {"_id": 999999, "isLikedByUser": True}
        response = post_json(client, "like_blog", data, token=reader_token)
        assert response.status_code == 404

    def test_like_requires_token(self, client, published_blog):
        data = {"_id": published_blog.pk, "isLikedByUser": True}
        assert post_json(client, "like_blog", data).status_code == 401


class TestDiscovery:
    """Tests for latest and trending listings."""

    @pytest.fixture
    def blogs(self, author, draft_blog):
        created = []
        for title in ["First", "Second", "Third"]:
            blog_id = upsert_blog(author, **{**PUBLISHABLE, "title": title})
            created.append(Blog.objects.get(blog_id=blog_id))
        return created

    def test_latest_blogs(self, client, blogs):
        response = post_json(client, "latest_blogs", {"page": 1})
        titles = [blog["title"] for blog in response.json()["blogs"]]
        assert titles == ["Third", "Second"]

        response = post_json(client, "latest_blogs", {"page": 2})
        assert [blog["title"] for blog in response.json()["blogs"]] == ["First"]

    def test_latest_blogs_past_end(self, client, blogs):
        response = post_json(client, "latest_blogs", {"page": 9})
        assert response.json() == {"blogs": []}

    def test_latest_blogs_count(self, client, blogs):
        response = post_json(client, "latest_blogs_count")
        assert response.json() == {"totalDocs": 3}

    def test_trending_blogs(self, client, blogs):
        Blog.objects.filter(pk=blogs[0].pk).update(total_reads=10)
        Blog.objects.filter(pk=blogs[1].pk).update(total_reads=5, total_likes=1)
        Blog.objects.filter(pk=blogs[2].pk).update(total_reads=5)

        response = client.get(reverse("blog_engagement:trending_blogs"))
        titles = [blog["title"] for blog in response.json()["blogs"]]
        assert titles == ["First", "Second", "Third"]

    def test_drafts_not_listed(self, client, draft_blog):
        response = post_json(client, "latest_blogs", {"page": 1})
        assert response.json() == {"blogs": []}


class TestProfile:
    """Tests for get-profile."""

    def test_profile(self, client, author, published_blog):
        response = post_json(client, "get_profile", {"username": "author"})

        assert response.status_code == 200
        data = response.json()
        assert data["fullname"] == "Ada Author"
        assert data["account_info"] == {"total_posts": 1, "total_reads": 0}

    def test_unknown_user(self, client, db):
        response = post_json(client, "get_profile", {"username": "nobody"})
        assert response.status_code == 404
