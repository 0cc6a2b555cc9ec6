"""
Django admin configuration for blog_engagement.
"""
from django.contrib import admin, messages

from .models import AuthorAccount, Blog, Notification, Tag
from .exceptions import ValidationError
from .publication import check_publishable, upsert_blog


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "blog_count", "created_at"]
    search_fields = ["name", "slug"]
    prepopulated_fields = {"slug": ("name",)}
    readonly_fields = ["created_at"]


@admin.register(Blog)
class BlogAdmin(admin.ModelAdmin):
    list_display = [
        "title_preview",
        "blog_id",
        "author",
        "draft",
        "total_reads",
        "total_likes",
        "published_at",
    ]
    list_filter = ["draft", "published_at", "created_at"]
    search_fields = ["title", "description", "blog_id", "author__username"]
    raw_id_fields = ["author"]
    filter_horizontal = ["tags"]
    date_hierarchy = "created_at"
    readonly_fields = [
        "blog_id",
        "draft",
        "total_reads",
        "total_likes",
        "created_at",
        "updated_at",
        "published_at",
    ]

    fieldsets = (
        (None, {
            "fields": ("title", "blog_id", "description", "banner", "author")
        }),
        ("Content", {
            "fields": ("content", "tags")
        }),
        ("Status", {
            "fields": ("draft", "published_at")
        }),
        ("Activity", {
            "fields": ("total_reads", "total_likes", "created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    actions = ["publish_blogs", "unpublish_blogs"]

    def title_preview(self, obj):
        """Truncated title for list display."""
        return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title

    title_preview.short_description = "Title"

    def has_add_permission(self, request):
        # Blogs are created through the API so blog_id and publish checks apply
        return False

    def _set_draft(self, queryset, draft):
        """
        Move blogs into or out of drafts and return (changed, skipped).

        Publishing runs the same completeness checks as creating a published
        blog; blogs that fail them are skipped. Changes go through upsert_blog
        so the authors' total_posts follow.
        """
        changed, skipped = [], []
        for blog in queryset.select_related("author").prefetch_related("tags"):
            fields = {
                "title": blog.title,
                "description": blog.description,
                "banner": blog.banner,
                "content": blog.content,
                "tags": blog.tag_names,
            }
            if not draft:
                try:
                    check_publishable(**fields)
                except ValidationError as exc:
                    skipped.append((blog, exc.message))
                    continue
            upsert_blog(blog.author, draft=draft, blog_id=blog.blog_id, **fields)
            changed.append(blog)
        return changed, skipped

    @admin.action(description="Publish selected blogs")
    def publish_blogs(self, request, queryset):
        changed, skipped = self._set_draft(queryset, False)
        self.message_user(request, f"{len(changed)} blogs published.")
        for blog, reason in skipped:
            self.message_user(
                request,
                f'"{blog.title}" was not published: {reason}',
                level=messages.WARNING,
            )

    @admin.action(description="Move selected blogs back to drafts")
    def unpublish_blogs(self, request, queryset):
        changed, _ = self._set_draft(queryset, True)
        self.message_user(request, f"{len(changed)} blogs moved to drafts.")


@admin.register(AuthorAccount)
class AuthorAccountAdmin(admin.ModelAdmin):
    list_display = ["user", "total_posts", "total_reads", "created_at"]
    search_fields = ["user__username", "user__email"]
    raw_id_fields = ["user"]
    readonly_fields = ["total_posts", "total_reads", "created_at", "updated_at"]


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ["user", "type", "blog", "notification_for", "seen", "created_at"]
    list_filter = ["type", "seen", "created_at"]
    search_fields = ["user__username", "notification_for__username", "blog__title"]
    raw_id_fields = ["user", "blog", "notification_for"]
