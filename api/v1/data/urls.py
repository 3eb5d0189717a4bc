"""
URL configuration for the resource dispatch endpoint.
"""

from django.urls import path

from api.v1.data import views

urlpatterns = [
    path(
        "data",
        views.ResourceDispatchView.as_view(),
        name="data",
    ),
]
