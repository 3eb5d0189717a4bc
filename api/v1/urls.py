"""
URL configuration for API v1.
"""

from django.urls import include, path

app_name = "v1"

urlpatterns = [
    path("", include("api.v1.panel.urls")),
    path("", include("api.v1.client.urls")),
    path("", include("api.v1.data.urls")),
]
