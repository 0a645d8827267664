"""Shared helpers for tests (users, articles, uploads, temporary media)."""

from __future__ import annotations

import itertools
import shutil
import tempfile
from io import BytesIO

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from PIL import Image

from articles.models import Article
from authentication.managers import UserManager

User = get_user_model()

_sequence = itertools.count(1)


def create_user(email: str | None = None, password: str = "AuthorPass123", **extra):
    """Create a user with a bcrypt-hashed password for tests."""

    if email is None:
        email = f"author{next(_sequence)}@example.com"
    return User.objects.create(
        email=email,
        password_hash=UserManager.hash_password(password),
        **extra,
    )


def create_article(owner=None, **extra) -> Article:
    """Create an article with unique title/slug; ``extra`` overrides any field."""

    number = next(_sequence)
    fields = {
        "title": f"Article number {number}",
        "slug": f"article-number-{number}",
        "content": f"Content of article {number}.",
    }
    fields.update(extra)
    return Article.objects.create(owner=owner or create_user(), **fields)


def make_image(name: str = "image.png", size: tuple[int, int] = (12, 12)) -> SimpleUploadedFile:
    """Return a small, valid PNG upload."""

    buffer = BytesIO()
    Image.new("RGB", size, color="white").save(buffer, format="PNG")
    return SimpleUploadedFile(name, buffer.getvalue(), content_type="image/png")


class TemporaryMediaMixin:
    """Point MEDIA_ROOT at a fresh throwaway directory for every test."""

    def setUp(self):
        super().setUp()
        self.media_root = tempfile.mkdtemp(prefix="article-media-")
        self.addCleanup(shutil.rmtree, self.media_root, ignore_errors=True)
        media_override = override_settings(MEDIA_ROOT=self.media_root)
        media_override.enable()
        self.addCleanup(media_override.disable)
