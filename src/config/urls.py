from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from django.urls import include, path

urlpatterns = [
    path("api/", include("modules.products.urls")),
    # OpenAPI schema & docs (public)
    path("docs/schema", SpectacularAPIView.as_view(), name="schema"),
    path("docs", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("docs/redoc", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]
