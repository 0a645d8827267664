"""Routing for the article pages."""

from django.urls import path

from .views import ArticleFormView, ArticleListView

app_name = "articles"

urlpatterns = [
    path("", ArticleListView.as_view(), name="index"),
    path("create/", ArticleFormView.as_view(), name="create"),
    path("<int:pk>/edit/", ArticleFormView.as_view(), name="edit"),
]
