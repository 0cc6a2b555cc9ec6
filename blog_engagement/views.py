"""
JSON API views for django-blog-engagement.

Every endpoint takes a JSON body and answers with JSON. Domain errors are
rendered as {"error": message} with the status code of the error.
"""
import json
import logging

from django.contrib.auth import get_user_model
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from . import discovery, engagement
from .auth import BearerTokenRequiredMixin
from .exceptions import BlogEngagementError, NotFoundError, ValidationError
from .models import AuthorAccount
from .publication import upsert_blog

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name="dispatch")
class JsonApiView(View):
    """Base view: parses the JSON body and renders domain errors."""

    http_method_names = ["post"]

    def authenticate(self, request):
        """Hook for BearerTokenRequiredMixin."""

    def dispatch(self, request, *args, **kwargs):
        try:
            self.authenticate(request)
            self.data = self.parse_body(request)
            return super().dispatch(request, *args, **kwargs)
        except BlogEngagementError as exc:
            logger.info("%s %s -> %s: %s", request.method, request.path,
                        exc.status_code, exc.message)
            return JsonResponse({"error": exc.message}, status=exc.status_code)

    def parse_body(self, request):
        if not request.body:
            return {}
        try:
            data = json.loads(request.body)
        except (TypeError, ValueError):
            raise ValidationError("Malformed JSON body.")
        if not isinstance(data, dict):
            raise ValidationError("JSON body must be an object.")
        return data


class BlogCreateView(BearerTokenRequiredMixin, JsonApiView):
    """Create a blog, or update the caller's blog when blogId is given."""

    def post(self, request):
        blog_id = upsert_blog(
            request.user,
            title=self.data.get("title"),
            description=self.data.get("description"),
            banner=self.data.get("banner"),
            content=self.data.get("content"),
            tags=self.data.get("tags"),
            draft=self.data.get("draft"),
            blog_id=self.data.get("blogId"),
        )
        return JsonResponse({"id": blog_id})


class BlogDetailView(JsonApiView):
    """Return a blog, counting the read."""

    def post(self, request):
        blog_id = self.data.get("blogId")
        if not blog_id:
            raise ValidationError("you must provide blogId.", field="blogId")

        blog = engagement.record_view(
            blog_id,
            mode=self.data.get("mode"),
            draft=bool(self.data.get("draft")),
        )
        return JsonResponse({"blog": blog.to_dict()})


class LikeToggleView(BearerTokenRequiredMixin, JsonApiView):
    """Like or unlike a blog; isLikedByUser is the state to end up in."""

    def post(self, request):
        want_liked = self.data.get("isLikedByUser")
        if not isinstance(want_liked, bool):
            raise ValidationError("isLikedByUser must be a boolean.", field="isLikedByUser")
        liked = engagement.toggle_like(request.user, self.data.get("_id"), want_liked)
        return JsonResponse({"likedByUser": liked})


class LikeStatusView(BearerTokenRequiredMixin, JsonApiView):
    """Return whether the caller likes a blog."""

    def post(self, request):
        liked = engagement.is_liked(request.user, self.data.get("_id"))
        return JsonResponse(liked, safe=False)


class LatestBlogsView(JsonApiView):
    """One page of published blogs, newest first."""

    def post(self, request):
        blogs = discovery.latest_blogs(self.data.get("page") or 1)
        return JsonResponse({"blogs": [blog.to_summary() for blog in blogs]})


class LatestBlogsCountView(JsonApiView):

    def post(self, request):
        return JsonResponse({"totalDocs": discovery.count_published()})


class TrendingBlogsView(JsonApiView):
    """Most read published blogs."""

    http_method_names = ["get"]

    def get(self, request):
        blogs = discovery.trending_blogs()
        return JsonResponse({
            "blogs": [
                {
                    "blog_id": blog.blog_id,
                    "title": blog.title,
                    "publishedAt": blog.published_at.isoformat(),
                    "author": AuthorAccount.profile_for(blog.author),
                }
                for blog in blogs
            ]
        })


class AuthorProfileView(JsonApiView):
    """Public profile and counters of an author."""

    def post(self, request):
        User = get_user_model()
        username = self.data.get("username") or ""
        try:
            user = User.objects.select_related("account_info").get(
                **{User.USERNAME_FIELD: username}
            )
        except User.DoesNotExist:
            raise NotFoundError("User not found.")

        account, _ = AuthorAccount.objects.get_or_create(user=user)
        return JsonResponse(account.to_dict())
