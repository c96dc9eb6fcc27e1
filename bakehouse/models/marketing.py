"""
MarketingAsset model - photo-aware brand library.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class AssetType(models.TextChoices):
    HERO = "hero", _("Hero")
    INGREDIENT = "ingredient", _("Ingredient")
    PROCESS = "process", _("Process")
    LIFESTYLE = "lifestyle", _("Lifestyle")
    PACKAGING = "packaging", _("Packaging")


class UsageContext(models.TextChoices):
    HOMEPAGE = "homepage", _("Homepage")
    PRODUCT = "product", _("Product")
    EMAIL = "email", _("Email")
    SOCIAL = "social", _("Social")
    WHOLESALE = "wholesale", _("Wholesale")


class MarketingAsset(models.Model):
    name = models.CharField(max_length=200, verbose_name=_("Name"))
    asset_type = models.CharField(
        max_length=20,
        choices=AssetType.choices,
        verbose_name=_("Asset type"),
    )
    usage_context = models.CharField(
        max_length=20,
        choices=UsageContext.choices,
        verbose_name=_("Usage context"),
    )
    image_url = models.URLField(max_length=500, blank=True, verbose_name=_("Image URL"))
    notes = models.TextField(blank=True, verbose_name=_("Notes"))
    product = models.ForeignKey(
        "bakehouse.Product",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="marketing_assets",
        verbose_name=_("Product"),
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "bakehouse_marketing_asset"
        verbose_name = _("Marketing asset")
        verbose_name_plural = _("Marketing assets")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
