from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("bakehouse.api.urls")),
    path("bakehouse/", include("bakehouse.urls")),
]
