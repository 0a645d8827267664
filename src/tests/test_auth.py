"""Tests for bcrypt users and the session login/logout pages."""

from __future__ import annotations

from django.contrib.auth import SESSION_KEY, get_user_model
from django.test import TestCase
from django.urls import reverse

from tests.utils import create_user

User = get_user_model()


class UserManagerTests(TestCase):
    """Users are created with bcrypt hashes."""

    def test_create_user_hashes_password_with_bcrypt(self):
        user = User.objects.create_user("Writer@Example.com", "StrongPass123")

        self.assertTrue(user.password_hash.startswith("$2"))
        self.assertNotIn("StrongPass123", user.password_hash)
        self.assertTrue(user.check_password("StrongPass123"))
        self.assertFalse(user.check_password("wrong"))
        self.assertFalse(user.check_password(None))
        self.assertEqual(user.email, "Writer@example.com")
        self.assertFalse(user.is_staff)

    def test_create_user_requires_email_and_password(self):
        with self.assertRaises(ValueError):
            User.objects.create_user("", "StrongPass123")
        with self.assertRaises(ValueError):
            User.objects.create_user("writer@example.com")

    def test_create_superuser_sets_flags(self):
        admin = User.objects.create_superuser("admin@example.com", "AdminPass123")

        self.assertTrue(admin.is_staff)
        self.assertTrue(admin.is_superuser)

    def test_create_superuser_rejects_cleared_flags(self):
        with self.assertRaises(ValueError):
            User.objects.create_superuser("admin@example.com", "AdminPass123", is_staff=False)
        self.assertFalse(User.objects.exists())

    def test_user_without_a_hash_never_authenticates(self):
        user = User(email="blank@example.com")

        self.assertFalse(user.check_password(""))

    def test_set_password_rehashes(self):
        user = create_user(password="OldPass123")

        user.set_password("NewPass123")

        self.assertTrue(user.check_password("NewPass123"))
        self.assertFalse(user.check_password("OldPass123"))


class LoginFlowTests(TestCase):
    """Session login with email + password."""

    @classmethod
    def setUpTestData(cls):
        cls.password = "StrongPass123"
        cls.user = create_user("writer@example.com", cls.password)

    def test_login_success_redirects_to_articles(self):
        response = self.client.post(
            reverse("login"),
            {"username": self.user.email, "password": self.password},
        )

        self.assertRedirects(response, reverse("articles:index"))
        self.assertEqual(self.client.session[SESSION_KEY], str(self.user.pk))

    def test_login_honours_next(self):
        create_url = reverse("articles:create")
        response = self.client.post(
            f"{reverse('login')}?next={create_url}",
            {"username": self.user.email, "password": self.password, "next": create_url},
        )

        self.assertRedirects(response, create_url)

    def test_login_invalid_credentials_rerenders_form(self):
        response = self.client.post(
            reverse("login"),
            {"username": self.user.email, "password": "wrongpass"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "registration/login.html")
        self.assertNotIn(SESSION_KEY, self.client.session)

    def test_login_inactive_user_is_rejected(self):
        self.user.is_active = False
        self.user.save(update_fields=["is_active"])

        response = self.client.post(
            reverse("login"),
            {"username": self.user.email, "password": self.password},
        )

        self.assertEqual(response.status_code, 200)
        self.assertNotIn(SESSION_KEY, self.client.session)

    def test_logout_ends_session(self):
        self.client.force_login(self.user)

        response = self.client.post(reverse("logout"))

        self.assertRedirects(response, reverse("login"))
        self.assertNotIn(SESSION_KEY, self.client.session)
        self.assertEqual(self.client.get(reverse("articles:create")).status_code, 302)
