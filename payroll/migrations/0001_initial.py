from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PayOverride",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("job", models.CharField(max_length=100)),
                (
                    "subjob",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Blank when the override applies to the job without a subjob",
                        max_length=100,
                    ),
                ),
                ("location", models.CharField(max_length=100)),
                (
                    "shift_type",
                    models.CharField(
                        help_text="DAY, NIGHT or GRAVEYARD (matched case-insensitively)",
                        max_length=20,
                    ),
                ),
                (
                    "hours",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=5,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0")),
                            django.core.validators.MaxValueValidator(Decimal("24")),
                        ],
                    ),
                ),
                (
                    "overtime_hours",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0"),
                        max_digits=5,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0")),
                            django.core.validators.MaxValueValidator(Decimal("24")),
                        ],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Pay Override",
                "verbose_name_plural": "Pay Overrides",
                "ordering": ["job", "subjob", "location", "shift_type"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("job", "subjob", "location", "shift_type"),
                        name="uniq_pay_override_natural_key",
                    ),
                ],
            },
        ),
    ]
