"""User manager: email-keyed accounts with bcrypt password hashes."""

import logging

import bcrypt
from django.contrib.auth.base_user import BaseUserManager

logger = logging.getLogger(__name__)


class UserManager(BaseUserManager):
    """Creates article authors and checks their passwords with bcrypt."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields):
        if not email:
            raise ValueError("An email address is required.")
        if password is None:
            raise ValueError("A password is required.")
        user = self.model(email=self.normalize_email(email), **extra_fields)
        user.password_hash = self.hash_password(password)
        user.save(using=self._db)
        logger.info("Created user %s (staff=%s)", user.email, user.is_staff)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        for flag in ("is_staff", "is_superuser"):
            if extra_fields[flag] is not True:
                raise ValueError(f"Superuser must have {flag}=True.")
        return self._create_user(email, password, **extra_fields)

    @staticmethod
    def hash_password(raw_password: str) -> str:
        return bcrypt.hashpw(raw_password.encode(), bcrypt.gensalt()).decode()

    @staticmethod
    def verify_password(user, raw_password: str | None) -> bool:
        """True when ``raw_password`` matches the user's stored hash."""
        if raw_password is None or not user.password_hash:
            return False
        return bcrypt.checkpw(raw_password.encode(), user.password_hash.encode())


__all__ = ["UserManager"]
