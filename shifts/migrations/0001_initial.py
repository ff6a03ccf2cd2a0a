from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ShiftEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField()),
                (
                    "entry_type",
                    models.CharField(
                        choices=[
                            ("worked", "Worked"),
                            ("leave", "Leave"),
                            ("vacation", "Vacation"),
                            ("standby", "Standby"),
                            ("stat_holiday", "Stat Holiday"),
                            ("day_off", "Day Off"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "leave_type",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("sick_leave", "Sick Leave"),
                            ("personal_leave", "Personal Leave"),
                            ("parental_leave", "Parental Leave"),
                        ],
                        default="",
                        max_length=20,
                    ),
                ),
                ("job", models.CharField(blank=True, default="", max_length=100)),
                ("subjob", models.CharField(blank=True, default="", max_length=100)),
                ("location", models.CharField(blank=True, default="", max_length=100)),
                (
                    "shift_type",
                    models.CharField(
                        blank=True,
                        choices=[("day", "Day"), ("night", "Night"), ("graveyard", "Graveyard")],
                        default="",
                        max_length=20,
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
                (
                    "travel_hours",
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
                (
                    "overtime_rate",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=8,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                ("meal", models.BooleanField(default=False, help_text="Half-hour meal premium at the overtime rate")),
                ("foreman", models.CharField(blank=True, default="", max_length=100)),
                ("vessel", models.CharField(blank=True, default="", max_length=100)),
                ("holiday", models.CharField(blank=True, default="", max_length=100)),
                (
                    "qualifying_days",
                    models.PositiveSmallIntegerField(
                        blank=True,
                        choices=[(14, "1-14"), (15, "15+")],
                        help_text="Days worked in the qualifying window: 14 = 1-14, 15 = 15+",
                        null=True,
                    ),
                ),
                (
                    "hours",
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
                (
                    "rate",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=8,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                (
                    "total_pay",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=10,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                ("points_earned", models.PositiveIntegerField(default=0, help_text="Set when the entry is created, never recomputed")),
                ("will_receive_paystub", models.BooleanField(default=False)),
                ("notes", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="shift_entries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Shift Entry",
                "verbose_name_plural": "Shift Entries",
                "ordering": ["-date", "-created_at"],
                "indexes": [
                    models.Index(fields=["owner", "date"], name="shift_owner_date_idx"),
                    models.Index(fields=["owner", "entry_type"], name="shift_owner_type_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("total_pay__isnull", True), ("total_pay__gte", 0), _connector="OR"),
                        name="shift_total_pay_non_negative",
                    ),
                ],
            },
        ),
    ]
