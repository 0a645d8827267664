"""Article model edited through the article form."""

import os
import uuid

from django.conf import settings
from django.db import models


def article_image_path(instance, filename: str) -> str:
    """Store uploads under a generated unique name, keeping the extension."""
    _, ext = os.path.splitext(filename)
    return f"articles/{uuid.uuid4().hex}{ext.lower()}"


class Article(models.Model):
    """Article with a unique slug and an optional stored image."""

    title = models.CharField(max_length=255)
    slug = models.CharField(max_length=255, unique=True)
    content = models.TextField()
    image = models.ImageField(upload_to=article_image_path, max_length=255, blank=True)
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="articles")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.title

    @property
    def image_url(self) -> str | None:
        """Public URL of the stored image, or None when there is none."""
        if not self.image:
            return None
        return self.image.url


__all__ = ["Article", "article_image_path"]
