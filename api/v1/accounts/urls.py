"""
URL configuration for users API endpoints.
"""

from django.urls import path

from api.v1.accounts import views

urlpatterns = [
    path("", views.UsersServiceStatusView.as_view(), name="users-status"),
    path("createUser", views.CreateUserView.as_view(), name="create-user"),
    path("getUserRank", views.GetUserRankView.as_view(), name="get-user-rank"),
]
