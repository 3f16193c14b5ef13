"""
Account model.
"""
import uuid

from django.db import models


class Account(models.Model):
    """
    A caller identity holding a bearer token and a rank.
    """

    RANK_CHOICES = [
        (1, "Member"),
        (2, "Moderator"),
        (3, "Admin"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(max_length=150, unique=True)
    email = models.EmailField()
    token = models.CharField(max_length=255, unique=True, db_index=True)
    password_hash = models.CharField(max_length=255)
    rank = models.IntegerField(choices=RANK_CHOICES, default=1)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "accounts"
        ordering = ["-created_at"]

    def __str__(self):
        return self.username
