"""Routing for the article form API."""

from django.urls import path

from .api import ArticleFormFieldView

urlpatterns = [
    path("article-form/field/", ArticleFormFieldView.as_view(), name="article-form-field"),
]
