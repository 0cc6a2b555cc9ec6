"""
Blog and Tag models for django-blog-engagement.
"""
from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.text import slugify

from ..conf import blog_settings
from .accounts import AuthorAccount


class Tag(models.Model):
    """
    Flat tag for blogs.

    Names are stored lowercase so "Django" and "django" are the same tag.
    The name is the identity; different names may share a slug ("c++" and
    "c#" both slug to "c").
    """

    name = models.CharField(max_length=100, unique=True)
    slug = models.SlugField(max_length=100, allow_unicode=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        self.name = self.name.lower()
        if not self.slug:
            self.slug = slugify(self.name, allow_unicode=True)[:blog_settings.SLUG_MAX_LENGTH]
        super().save(*args, **kwargs)

    @property
    def blog_count(self):
        """Return count of published blogs with this tag."""
        return self.blogs.filter(draft=False).count()


class Blog(models.Model):
    """
    Blog written by an author.

    A blog is either a draft or published. Reads and likes are kept as
    counters on the row itself and only ever changed with atomic UPDATEs
    (see blog_engagement.counters).
    """

    blog_id = models.CharField(max_length=255, unique=True)

    # Content
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    banner = models.CharField(max_length=500, blank=True)
    content = models.JSONField(
        default=dict,
        blank=True,
        help_text="Editor payload; published blogs need at least one entry in 'blocks'",
    )
    tags = models.ManyToManyField(Tag, related_name="blogs", blank=True)

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blogs",
    )

    # Status
    draft = models.BooleanField(default=False)
    published_at = models.DateTimeField(
        null=True,
        blank=True,
        db_index=True,
        help_text="When blog was first published",
    )

    # Activity
    total_reads = models.PositiveIntegerField(default=0)
    total_likes = models.PositiveIntegerField(default=0)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-published_at", "-created_at"]
        indexes = [
            models.Index(fields=["draft", "-published_at"]),
            models.Index(fields=["author", "-created_at"]),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        # published_at is only ever set once
        if not self.draft and not self.published_at:
            self.published_at = timezone.now()
            update_fields = kwargs.get("update_fields")
            if update_fields is not None and "published_at" not in update_fields:
                kwargs["update_fields"] = list(update_fields) + ["published_at"]

        super().save(*args, **kwargs)

    @property
    def is_published(self):
        return not self.draft

    @property
    def activity(self):
        """Return the read and like counters."""
        return {
            "total_reads": self.total_reads,
            "total_likes": self.total_likes,
        }

    @property
    def tag_names(self):
        return [tag.name for tag in self.tags.all()]

    def to_summary(self):
        """Return the listing representation used by discovery feeds."""
        return {
            "blog_id": self.blog_id,
            "title": self.title,
            "description": self.description,
            "banner": self.banner,
            "activity": self.activity,
            "tags": self.tag_names,
            "publishedAt": self.published_at.isoformat() if self.published_at else None,
            "author": AuthorAccount.profile_for(self.author),
        }

    def to_dict(self):
        """Return the full representation, including content."""
        data = self.to_summary()
        data.update({
            "_id": self.pk,
            "content": self.content,
            "draft": self.draft,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        })
        return data
