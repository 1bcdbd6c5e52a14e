"""Root URL configuration for wikilookup_tool."""

from django.urls import include, path

urlpatterns = [
    path('', include('wikilookup.urls')),
]
