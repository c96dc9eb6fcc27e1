"""
Tests that the shipped migrations match the models.
"""

from io import StringIO

import pytest
from django.core.management import call_command


@pytest.mark.django_db
class TestMigrations:
    def test_no_pending_changes(self, settings):
        # The suite runs with --nomigrations, which disables migration modules
        settings.MIGRATION_MODULES = {}
        out = StringIO()

        call_command("makemigrations", "bakehouse", "--check", "--dry-run", stdout=out)

        assert "No changes detected" in out.getvalue()
