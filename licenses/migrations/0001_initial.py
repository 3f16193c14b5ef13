import uuid

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="License",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("key", models.CharField(db_index=True, max_length=255, unique=True)),
                (
                    "owner",
                    models.CharField(blank=True, db_index=True, max_length=255, null=True),
                ),
                ("created", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "duration",
                    models.PositiveIntegerField(
                        help_text="Days of validity after first activation"
                    ),
                ),
                ("expiry", models.DateTimeField(blank=True, null=True)),
                (
                    "bound_address",
                    models.CharField(
                        blank=True,
                        help_text="Address bound at first activation",
                        max_length=64,
                        null=True,
                    ),
                ),
                ("suspended", models.BooleanField(db_index=True, default=False)),
            ],
            options={
                "db_table": "licenses",
                "ordering": ["-created"],
                "indexes": [
                    models.Index(fields=["owner"], name="licenses_owner_0f3b2a_idx"),
                    models.Index(fields=["expiry"], name="licenses_expiry_7c1d4e_idx"),
                ],
            },
        ),
    ]
