"""
URL configuration for license API endpoints.
"""

from django.urls import path

from api.v1.licenses import views

urlpatterns = [
    path("", views.LicenseServiceStatusView.as_view(), name="licenses-status"),
    path("amount", views.LicenseCountView.as_view(), name="count-licenses"),
    path("createLicense", views.CreateLicenseView.as_view(), name="create-license"),
    path("claim", views.ClaimLicenseView.as_view(), name="claim-license"),
    path("auth", views.AuthenticateLicenseView.as_view(), name="authenticate-license"),
    path("suspend", views.SuspendLicenseView.as_view(), name="suspend-license"),
    path("delete", views.DeleteLicenseView.as_view(), name="delete-license"),
    path("info", views.LicenseInfoView.as_view(), name="license-info"),
    path("active", views.LicenseActiveView.as_view(), name="license-active"),
]
