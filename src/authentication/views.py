"""Session login and logout pages."""

import logging

from django.contrib.auth import views as auth_views

logger = logging.getLogger(__name__)


class LoginView(auth_views.LoginView):
    """Email/password login; the bcrypt check runs in ``User.check_password``."""

    template_name = "registration/login.html"
    redirect_authenticated_user = True

    def form_valid(self, form):
        logger.info("User %s logged in", form.get_user().email)
        return super().form_valid(form)

    def form_invalid(self, form):
        # Never echo which part of the credentials was wrong.
        logger.info("Rejected login attempt")
        return super().form_invalid(form)


class LogoutView(auth_views.LogoutView):
    """End the session and return to the login page."""


__all__ = ["LoginView", "LogoutView"]
