"""
URL configuration for django-blog-engagement.

Include in your project urls.py:

    path('api/', include('blog_engagement.urls')),
"""
from django.urls import path

from . import views

app_name = "blog_engagement"

urlpatterns = [
    # Authoring
    path("create-blog/", views.BlogCreateView.as_view(), name="create_blog"),

    # Reading
    path("get-blog/", views.BlogDetailView.as_view(), name="get_blog"),

    # Likes
    path("like-blog/", views.LikeToggleView.as_view(), name="like_blog"),
    path("isliked-by-user/", views.LikeStatusView.as_view(), name="isliked_by_user"),

    # Discovery
    path("latest-blogs/", views.LatestBlogsView.as_view(), name="latest_blogs"),
    path("all-latest-blogs-count/", views.LatestBlogsCountView.as_view(), name="latest_blogs_count"),
    path("trending-blogs/", views.TrendingBlogsView.as_view(), name="trending_blogs"),

    # Authors
    path("get-profile/", views.AuthorProfileView.as_view(), name="get_profile"),
]
