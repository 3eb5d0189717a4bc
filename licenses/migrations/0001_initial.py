import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("applications", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="LicenseKey",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("key_value", models.CharField(db_index=True, max_length=100, unique=True)),
                ("user_name", models.CharField(max_length=255)),
                ("user_contact", models.CharField(help_text="Email or phone", max_length=255)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "application",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="license_keys",
                        to="applications.application",
                    ),
                ),
            ],
            options={
                "db_table": "license_keys",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["application", "is_active"],
                        name="license_key_applica_5c1e2b_idx",
                    ),
                    models.Index(fields=["end_date"], name="license_key_end_dat_8f3a41_idx"),
                ],
            },
        ),
    ]
