"""Seed a demo author and sample articles."""

import logging

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from articles.models import Article
from articles.text import slug_from_title
from authentication.managers import UserManager

logger = logging.getLogger(__name__)

DEMO_EMAIL = "author@example.com"
DEMO_PASSWORD = "authorpass"
DEMO_ARTICLES = [
    ("Welcome to Article Desk", "Create, edit and illustrate your articles."),
    ("Writing good titles", "Titles need at least four characters and drive the slug."),
    ("Choosing a slug", "Slugs use letters, numbers, dashes and underscores only."),
]


def create_seed_user(email: str = DEMO_EMAIL, password: str = DEMO_PASSWORD):
    """Create (or fetch) the demo author."""
    User = get_user_model()
    user, _ = User.objects.get_or_create(
        email=email,
        defaults={
            "first_name": "Demo",
            "last_name": "Author",
            "password_hash": UserManager.hash_password(password),
        },
    )
    return user


def create_seed_articles(owner, articles=DEMO_ARTICLES) -> list[Article]:
    """Create the sample articles for ``owner``; slugs are derived from titles."""
    created = []
    for title, content in articles:
        article, _ = Article.objects.get_or_create(
            slug=slug_from_title(title),
            defaults={"title": title, "content": content, "owner": owner},
        )
        created.append(article)
    return created


def reset_seed_data(email: str = DEMO_EMAIL) -> int:
    """Remove the demo author; their articles cascade. Returns rows deleted."""
    deleted, _ = get_user_model().objects.filter(email=email).delete()
    return deleted


class Command(BaseCommand):
    """Management command to seed a demo author and articles."""

    help = "Seed a demo author and sample articles. Use --reset to clear them first."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete the demo author and their articles before seeding.",
        )

    def handle(self, *args, **options):
        """Entrypoint for the management command."""
        if options.get("reset"):
            deleted = reset_seed_data()
            logger.info("Removed %d seeded rows", deleted)
            self.stdout.write(self.style.WARNING("Seeded data cleared."))

        self.stdout.write("Seeding articles...")
        user = create_seed_user()
        articles = create_seed_articles(user)
        self.stdout.write(
            self.style.SUCCESS(f"Seeded {len(articles)} articles for {user.email} (password: {DEMO_PASSWORD}).")
        )
