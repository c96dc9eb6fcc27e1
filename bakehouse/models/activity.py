"""
ActivityLog model.

Audit trail of what happened in the bakehouse console
(batches started/completed, orders approved/cancelled, freezer stocked).
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ActivityLog(models.Model):
    """
    One audited event.

    Written by the signal handlers in bakehouse.signals.handlers.
    """

    action = models.CharField(
        max_length=100,
        db_index=True,
        verbose_name=_("Action"),
        help_text=_("Ex: 'batch.completed', 'order.approved'"),
    )
    entity_type = models.CharField(
        max_length=50,
        verbose_name=_("Entity type"),
    )
    entity_id = models.CharField(
        max_length=64,
        verbose_name=_("Entity ID"),
    )
    details = models.JSONField(
        default=dict,
        blank=True,
        verbose_name=_("Details"),
    )
    actor = models.CharField(
        max_length=255,
        blank=True,
        verbose_name=_("Actor"),
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))

    class Meta:
        db_table = "bakehouse_activity_log"
        verbose_name = _("Activity")
        verbose_name_plural = _("Activity log")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["entity_type", "entity_id"], name="bh_activity_entity_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.action} {self.entity_type}:{self.entity_id}"

    @classmethod
    def record(cls, action: str, entity_type: str, entity_id, details=None, actor: str = ""):
        return cls.objects.create(
            action=action,
            entity_type=entity_type,
            entity_id=str(entity_id),
            details=details or {},
            actor=actor or "",
        )
