"""
URL configuration for client application API endpoints.
"""

from django.urls import path

from api.v1.client import views

urlpatterns = [
    path(
        "validate",
        views.ValidateKeyView.as_view(),
        name="validate-key",
    ),
]
