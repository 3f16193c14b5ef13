"""
License model.
"""
import uuid

from django.db import models
from django.utils import timezone


class License(models.Model):
    """
    A license credential, claimed by one owner and bound to one address.

    ``owner`` is set once by a claim. ``expiry`` and ``bound_address`` are
    set together, once, by the first authentication after the claim.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    key = models.CharField(max_length=255, unique=True, db_index=True)
    owner = models.CharField(max_length=255, null=True, blank=True, db_index=True)
    created = models.DateTimeField(default=timezone.now)
    duration = models.PositiveIntegerField(help_text="Days of validity after first activation")
    expiry = models.DateTimeField(null=True, blank=True)
    bound_address = models.CharField(
        max_length=64, null=True, blank=True, help_text="Address bound at first activation"
    )
    suspended = models.BooleanField(default=False, db_index=True)

    class Meta:
        db_table = "licenses"
        ordering = ["-created"]
        indexes = [
            models.Index(fields=["owner"], name="licenses_owner_0f3b2a_idx"),
            models.Index(fields=["expiry"], name="licenses_expiry_7c1d4e_idx"),
        ]

    def __str__(self):
        return self.key

    @property
    def state(self) -> str:
        """Lifecycle position as a display string."""
        if self.owner is None:
            return "unclaimed"
        if self.expiry is None:
            return "claimed"
        return "activated"

    @property
    def is_active(self) -> bool:
        """
        Check if license is currently active.

        Returns:
            True if claimed, activated, unexpired and not suspended
        """
        if self.owner is None or self.expiry is None or self.suspended:
            return False
        return self.expiry >= timezone.now()
