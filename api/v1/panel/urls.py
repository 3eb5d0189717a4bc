"""
URL configuration for admin panel API endpoints.
"""

from django.urls import path

from api.v1.panel import views

urlpatterns = [
    path(
        "auth/login",
        views.LoginView.as_view(),
        name="login",
    ),
    path(
        "keys",
        views.LicenseKeyListView.as_view(),
        name="license-keys",
    ),
    path(
        "keys/<uuid:key_id>",
        views.LicenseKeyDetailView.as_view(),
        name="license-key-detail",
    ),
    path(
        "keys/<uuid:key_id>/toggle-status",
        views.ToggleKeyStatusView.as_view(),
        name="toggle-key-status",
    ),
    path(
        "applications",
        views.ApplicationListView.as_view(),
        name="applications",
    ),
    path(
        "applications/<uuid:application_id>",
        views.ApplicationDetailView.as_view(),
        name="application-detail",
    ),
    path(
        "users",
        views.UserListView.as_view(),
        name="users",
    ),
    path(
        "users/<uuid:user_id>",
        views.UserDetailView.as_view(),
        name="user-detail",
    ),
    path(
        "users/<uuid:user_id>/reset-password",
        views.ResetPasswordView.as_view(),
        name="reset-password",
    ),
]
