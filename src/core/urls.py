"""Root URL configuration for Article Desk."""
from django.conf import settings
from django.conf.urls.static import static
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.views import SpectacularAPIView

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="articles:index", permanent=False)),
    path("", include("authentication.urls")),
    path("articles/", include("articles.urls")),
    path("api/", include("articles.api_urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="api-schema"),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
