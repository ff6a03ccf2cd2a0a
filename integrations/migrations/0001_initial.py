from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Holiday",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField(unique=True)),
                ("name", models.CharField(max_length=100)),
                (
                    "qualifying_start",
                    models.DateField(
                        blank=True,
                        help_text="First day of the qualifying window (defaults to 28 days before the holiday)",
                        null=True,
                    ),
                ),
                (
                    "qualifying_end",
                    models.DateField(
                        blank=True,
                        help_text="Last day of the qualifying window (defaults to the holiday itself)",
                        null=True,
                    ),
                ),
            ],
            options={
                "verbose_name": "Holiday",
                "verbose_name_plural": "Holidays",
                "ordering": ["date"],
            },
        ),
    ]
