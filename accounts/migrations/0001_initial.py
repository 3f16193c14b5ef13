import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Account",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("username", models.CharField(max_length=150, unique=True)),
                ("email", models.EmailField(max_length=254)),
                ("token", models.CharField(db_index=True, max_length=255, unique=True)),
                ("password_hash", models.CharField(max_length=255)),
                (
                    "rank",
                    models.IntegerField(
                        choices=[(1, "Member"), (2, "Moderator"), (3, "Admin")], default=1
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "accounts",
                "ordering": ["-created_at"],
            },
        ),
    ]
