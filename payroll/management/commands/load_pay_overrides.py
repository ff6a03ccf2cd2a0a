import csv
from decimal import Decimal, InvalidOperation
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from payroll.models import PayOverride


class Command(BaseCommand):
    help = "Load pay overrides from a CSV file (JOB, SUBJOB, LOCATION, SHIFT, REGHRS, OTHRS)"

    def add_arguments(self, parser):
        parser.add_argument("csv_path", type=str, help="Path to the pay override CSV")
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Parse and report without writing anything",
        )

    def handle(self, *args, **options):
        path = Path(options["csv_path"])
        if not path.exists():
            raise CommandError(f"File not found: {path}")

        rows = self._parse(path)
        self.stdout.write(f"Parsed {len(rows)} pay override row(s)")

        if options["dry_run"]:
            self.stdout.write(self.style.WARNING("DRY RUN: nothing was written"))
            return

        created_count = 0
        updated_count = 0
        with transaction.atomic():
            for row in rows:
                _, created = PayOverride.objects.update_or_create(
                    job=row["job"],
                    subjob=row["subjob"],
                    location=row["location"],
                    shift_type=row["shift_type"],
                    defaults={
                        "hours": row["hours"],
                        "overtime_hours": row["overtime_hours"],
                    },
                )
                if created:
                    created_count += 1
                else:
                    updated_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"✓ Pay overrides loaded: {created_count} created, {updated_count} updated"
            )
        )

    def _parse(self, path):
        rows = []
        with path.open(newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            for line_number, raw in enumerate(reader, start=2):
                try:
                    rows.append(
                        {
                            "job": raw["JOB"].strip(),
                            "subjob": (raw.get("SUBJOB") or "").strip(),
                            "location": raw["LOCATION"].strip(),
                            "shift_type": raw["SHIFT"].strip().upper(),
                            "hours": Decimal(raw["REGHRS"].strip()),
                            "overtime_hours": Decimal((raw.get("OTHRS") or "").strip() or "0"),
                        }
                    )
                except (KeyError, AttributeError, InvalidOperation) as e:
                    raise CommandError(f"Invalid row at line {line_number}: {e}")
        return rows
