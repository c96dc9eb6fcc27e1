"""
Stock the basic bakery ingredients on an empty pantry.

Usage:
    python manage.py seed_pantry
"""

from django.core.management.base import BaseCommand, CommandError

from bakehouse.exceptions import BakehouseError
from bakehouse.service import bakery


class Command(BaseCommand):
    help = "Seeds the pantry with the basic bagel ingredients (empty pantry only)"

    def handle(self, *args, **options):
        try:
            created = bakery.seed_pantry()
        except BakehouseError as e:
            raise CommandError(str(e)) from e

        for ingredient in created:
            self.stdout.write(f"  {ingredient.name}: {ingredient.on_hand} {ingredient.unit}")

        self.stdout.write(self.style.SUCCESS(f"Seeded {len(created)} ingredients"))
