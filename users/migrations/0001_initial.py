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
            name="UserLedger",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("xp", models.PositiveIntegerField(default=0, help_text="Lifetime experience points")),
                ("points", models.PositiveIntegerField(default=0, help_text="Lifetime points")),
                ("sick_days_used", models.PositiveIntegerField(default=0)),
                ("personal_leave_used", models.PositiveIntegerField(default=0)),
                ("sick_days_available", models.PositiveIntegerField(default=5)),
                ("personal_leave_available", models.PositiveIntegerField(default=3)),
                ("sick_leave_start", models.DateField(blank=True, null=True)),
                ("sick_leave_end", models.DateField(blank=True, null=True)),
                ("personal_leave_start", models.DateField(blank=True, null=True)),
                ("personal_leave_end", models.DateField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ledger",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "User Ledger",
                "verbose_name_plural": "User Ledgers",
            },
        ),
    ]
