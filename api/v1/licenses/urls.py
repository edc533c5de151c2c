"""
URL configuration for license API endpoints.
"""

from django.urls import path

from api.v1.licenses import views

urlpatterns = [
    path("add", views.AddLicenseView.as_view(), name="add-license"),
    path("check", views.CheckLicenseView.as_view(), name="check-license"),
    path("invalidate", views.InvalidateLicenseView.as_view(), name="invalidate-license"),
    path("extend", views.ExtendLicenseView.as_view(), name="extend-license"),
]
