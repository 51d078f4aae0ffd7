from django.urls import path

from modules.core.views import api_root, health_check

urlpatterns = [
    path("health", health_check, name="health_check"),
    path("api", api_root, name="api_root"),
]
