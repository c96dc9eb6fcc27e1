"""
Bakehouse URL Configuration.
"""

from django.urls import path

from bakehouse.views import bake_sheet_view

app_name = "bakehouse"

urlpatterns = [
    path("bake-sheet/", bake_sheet_view, name="bake_sheet"),
]
