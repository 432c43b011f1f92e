# momokey_api/urls.py

from django.urls import path, include


# -----------------------------------------------------
# URL PATTERNS
# -----------------------------------------------------
urlpatterns = [
    # -----------------------------------------------------
    # MoMo credential generation
    # -----------------------------------------------------
    path("api/", include("momokeys.urls")),
]
