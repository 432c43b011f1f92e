from django.urls import re_path
from . import views

urlpatterns = [
    # 🔑 MoMo API User + API Key generation (with or without trailing slash)
    re_path(r"^generate/?$", views.generate_keys, name="generate_keys"),
]
