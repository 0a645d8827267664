"""The article form component.

``ArticleForm`` holds the state of one create/edit session: the bound
article, the staged image upload, and the current per-field errors. Every
field change goes through ``set()``, which derives the slug when the title
changes and re-validates only the changed field. ``save()`` validates the
whole form, stores the image, persists the article, and tells the caller
what to flash and where to go next.
"""

import logging
from dataclasses import dataclass

from django.core.exceptions import PermissionDenied, ValidationError
from django.shortcuts import get_object_or_404
from django.urls import reverse

from .models import Article
from .rules import article_rules
from .text import slug_from_title

logger = logging.getLogger(__name__)

IMAGE_FIELD = "image"
ARTICLE_FIELDS = ("title", "slug", "content")
FIELDS = (IMAGE_FIELD,) + tuple(f"article.{name}" for name in ARTICLE_FIELDS)


class FormState:
    IDLE = "idle"
    EDITING = "editing"
    SUBMITTING = "submitting"
    SAVED = "saved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class SaveOutcome:
    """Flash message to show once, and where to redirect."""

    status: str
    location: str


class ArticleForm:
    """Create or edit one article."""

    status_message = "Article saved."
    success_url_name = "articles:index"

    def __init__(self, article: Article | None = None, user=None):
        self.article = article if article is not None else Article()
        self.user = user
        self.image = None
        self.errors: dict[str, ValidationError] = {}
        self.state = FormState.IDLE

    @classmethod
    def mount(cls, article_id=None, user=None) -> "ArticleForm":
        """Bind to the article with ``article_id``, or to a new one when omitted."""
        if article_id is None:
            return cls(user=user)
        return cls(get_object_or_404(Article, pk=article_id), user=user)

    @property
    def is_editing(self) -> bool:
        return self.article.pk is not None

    @staticmethod
    def _attribute(field: str) -> str:
        prefix, _, name = field.partition(".")
        if prefix != "article" or name not in ARTICLE_FIELDS:
            raise ValueError(f"Unknown form field: {field!r}")
        return name

    def get(self, field: str):
        if field == IMAGE_FIELD:
            return self.image
        return getattr(self.article, self._attribute(field))

    def values(self) -> dict:
        """Current text field values keyed by field path."""
        return {f"article.{name}": getattr(self.article, name) for name in ARTICLE_FIELDS}

    def set(self, field: str, value) -> "ArticleForm":
        """Apply a field change and re-validate that field only.

        Changing the title overwrites the slug with one derived from it.
        """
        if field == IMAGE_FIELD:
            self.image = value or None
        else:
            setattr(self.article, self._attribute(field), value)
            if field == "article.title":
                self.article.slug = slug_from_title(value)
        self.state = FormState.EDITING
        self.validate_only(field)
        return self

    def rules(self):
        return article_rules(self.article)

    def validate_only(self, field: str) -> bool:
        """Check one field, updating only that field's error."""
        try:
            self.rules()[field].check(self.get(field))
        except ValidationError as exc:
            self.errors[field] = exc
            return False
        self.errors.pop(field, None)
        return True

    def validate(self) -> None:
        """Check every field; raise ``ValidationError`` keyed by field path."""
        errors = {}
        for field, field_rules in self.rules().items():
            try:
                field_rules.check(self.get(field))
            except ValidationError as exc:
                errors[field] = exc
        self.errors = errors
        if errors:
            raise ValidationError(errors)

    def has_error(self, field: str, code: str | None = None) -> bool:
        error = self.errors.get(field)
        if error is None:
            return False
        return code is None or error.code == code

    def has_no_errors(self, field: str | None = None, code: str | None = None) -> bool:
        if field is None:
            return not self.errors
        return not self.has_error(field, code)

    def error_codes(self) -> dict[str, str]:
        return {field: error.code for field, error in self.errors.items()}

    def error_messages(self) -> dict[str, str]:
        return {field: error.messages[0] for field, error in self.errors.items()}

    @property
    def field_errors(self) -> dict[str, str]:
        """Error messages keyed by the bare field name, for templates."""
        return {field.rpartition(".")[2]: message for field, message in self.error_messages().items()}

    def save(self) -> SaveOutcome:
        """Validate, store the staged image, and persist the article.

        Raises ``ValidationError`` before touching storage or the database
        when any field is invalid, and ``PermissionDenied`` without an
        authenticated user.
        """
        self.state = FormState.SUBMITTING
        try:
            self.validate()
        except ValidationError:
            self.state = FormState.REJECTED
            logger.info("Rejected article form: %s", self.error_codes())
            raise

        if self.user is None or not self.user.is_authenticated:
            self.state = FormState.REJECTED
            raise PermissionDenied("Only authenticated users can save articles.")

        if self.image is not None:
            self._store_image()

        created = not self.is_editing
        if created:
            self.article.owner = self.user
        self.article.save()

        self.image = None
        self.state = FormState.SAVED
        logger.info(
            "%s article %s (%s) by %s",
            "Created" if created else "Updated",
            self.article.pk,
            self.article.slug,
            self.user,
        )
        return SaveOutcome(status=self.status_message, location=reverse(self.success_url_name))

    def _store_image(self) -> None:
        """Replace the article's image with the staged upload."""
        previous = self.article.image.name if self.article.image else None
        if previous:
            # The field is overwritten below whether or not the file was there.
            self.article.image.delete(save=False)
            logger.info("Deleted previous image %s", previous)
        self.article.image.save(self.image.name, self.image, save=False)
        logger.info("Stored image %s", self.article.image.name)


__all__ = ["ArticleForm", "FIELDS", "FormState", "IMAGE_FIELD", "SaveOutcome"]
