"""Tests for the seed_articles management command."""

from __future__ import annotations

from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from articles.models import Article
from scripts.management.commands.seed_articles import DEMO_EMAIL, DEMO_PASSWORD, create_seed_user


class SeedArticlesCommandTests(TestCase):
    def test_seeds_author_and_articles(self):
        out = StringIO()
        call_command("seed_articles", stdout=out)

        author = create_seed_user()
        self.assertEqual(author.email, DEMO_EMAIL)
        self.assertTrue(author.check_password(DEMO_PASSWORD))
        self.assertEqual(Article.objects.filter(owner=author).count(), 3)
        self.assertTrue(Article.objects.filter(slug="welcome-to-article-desk").exists())
        self.assertIn("Seeded 3 articles", out.getvalue())

    def test_is_idempotent(self):
        call_command("seed_articles", stdout=StringIO())
        call_command("seed_articles", stdout=StringIO())

        self.assertEqual(Article.objects.count(), 3)

    def test_reset_recreates_data(self):
        call_command("seed_articles", stdout=StringIO())
        first_author = create_seed_user()

        call_command("seed_articles", "--reset", stdout=StringIO())

        self.assertEqual(Article.objects.count(), 3)
        self.assertNotEqual(create_seed_user().pk, first_author.pk)
        self.assertFalse(Article.objects.filter(owner_id=first_author.pk).exists())
