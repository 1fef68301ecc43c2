"""
Main URL configuration for the async API.
"""

from django.urls import include, path

# -----------------------------------------------------------------
# API URL Patterns
# -----------------------------------------------------------------
api_patterns = [
    path("player/", include("apps.players.urls")),
]

urlpatterns = [
    path("api/", include(api_patterns)),
]

# --- Global Error Handlers for API ---
# Unknown URLs and server errors answer with the same {"error": ...} body as the views.
handler404 = "apps.core.views.custom_handler.json_404_handler"
handler500 = "apps.core.views.custom_handler.json_500_handler"
