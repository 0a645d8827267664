"""Validation rules for the article form.

Each form field maps to an ordered list of Django-style validators: callables
that take the field value and raise ``ValidationError`` with an error code.
The first failing validator wins, so a field reports at most one code.

Codes reported to callers:

- ``required``: value missing, empty, or whitespace only
- ``min``: title shorter than four characters, ignoring surrounding
  whitespace
- ``alpha_dash``: slug contains something other than letters, digits,
  dashes, and underscores
- ``unique``: slug already used by another article
- ``image`` / ``max``: upload is not an image (by name and by content), or
  is too large
"""

from django import forms
from django.conf import settings
from django.core import validators
from django.core.exceptions import ValidationError

from .models import Article

TITLE_MIN_LENGTH = 4


def is_empty(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_required(value) -> None:
    if is_empty(value):
        raise ValidationError("This field is required.", code="required")


validate_alpha_dash = validators.RegexValidator(
    validators.slug_re,
    message="Use only letters, numbers, dashes and underscores.",
    code="alpha_dash",
)


class MinLengthValidator(validators.MinLengthValidator):
    message = "Ensure this value has at least %(limit_value)d characters (it has %(show_value)d)."
    code = "min"

    def clean(self, x):
        return len(x.strip())


class MaxKilobytesValidator(validators.BaseValidator):
    """Reject uploads larger than ``limit_value`` kilobytes."""

    message = "The image may not be greater than %(limit_value)s kilobytes."
    code = "max"

    def compare(self, a, b):
        return a > b

    def clean(self, x):
        return x.size / 1024


def validate_image(value) -> None:
    """Require an image file name and bytes Pillow can open and verify."""
    try:
        validators.validate_image_file_extension(value)
        forms.ImageField().to_python(value)
    except ValidationError as exc:
        raise ValidationError("The file must be an image.", code="image") from exc


class UniqueSlugValidator:
    """Reject a slug used by any article other than ``article`` itself."""

    message = "This slug has already been taken."
    code = "unique"

    def __init__(self, article: Article):
        self.article = article

    def __call__(self, value) -> None:
        queryset = Article.objects.filter(slug=value)
        if self.article.pk is not None:
            queryset = queryset.exclude(pk=self.article.pk)
        if queryset.exists():
            raise ValidationError(self.message, code=self.code, params={"value": value})


class FieldRules:
    """Ordered validators for one field.

    A ``nullable`` field skips every validator while it is empty.
    """

    def __init__(self, *validators, nullable: bool = False):
        self.validators = validators
        self.nullable = nullable

    def check(self, value) -> None:
        if self.nullable and is_empty(value):
            return
        for validator in self.validators:
            validator(value)


def article_rules(article: Article) -> dict[str, FieldRules]:
    """Build the ruleset for a form bound to ``article``."""
    return {
        "image": FieldRules(
            validate_image,
            MaxKilobytesValidator(settings.ARTICLE_IMAGE_MAX_KB),
            nullable=True,
        ),
        "article.title": FieldRules(validate_required, MinLengthValidator(TITLE_MIN_LENGTH)),
        "article.slug": FieldRules(validate_required, validate_alpha_dash, UniqueSlugValidator(article)),
        "article.content": FieldRules(validate_required),
    }


__all__ = [
    "FieldRules",
    "MaxKilobytesValidator",
    "MinLengthValidator",
    "UniqueSlugValidator",
    "article_rules",
    "is_empty",
    "validate_alpha_dash",
    "validate_image",
    "validate_required",
]
