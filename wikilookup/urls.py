"""URL configuration for the wikilookup app.

This module defines the URL patterns for the app's views. It also
specifies the ``app_name`` to allow namespacing from the project URL
configuration.
"""

from django.urls import path

from . import views

app_name = 'wikilookup'

urlpatterns = [
    path('lookup/', views.lookup, name='lookup'),
]
