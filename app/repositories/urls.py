"""URL configuration for repositories app."""

from django.urls import path
from . import views

app_name = "repositories"

urlpatterns = [
    path("report/", views.report_create, name="report"),
    path("<str:language>/", views.repository_list, name="list"),
]
