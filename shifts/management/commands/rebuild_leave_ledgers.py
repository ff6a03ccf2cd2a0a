from django.contrib.auth.models import User
from django.core.management.base import BaseCommand, CommandError

from shifts.services.leave_ledger import rebuild_leave_usage


class Command(BaseCommand):
    help = "Recount sick/personal leave usage from stored shift entries and fix ledger drift"

    def add_arguments(self, parser):
        parser.add_argument(
            "--user",
            type=str,
            help="Only rebuild the ledger of this username",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Report drift without changing any ledger",
        )

    def handle(self, *args, **options):
        dry_run = options["dry_run"]
        users = User.objects.order_by("pk")
        if options["user"]:
            users = users.filter(username=options["user"])
            if not users.exists():
                raise CommandError(f"User not found: {options['user']}")

        if dry_run:
            self.stdout.write(self.style.WARNING("DRY RUN: no ledger will be changed"))

        checked = 0
        drifted = 0
        for user in users.iterator():
            checked += 1
            correction = rebuild_leave_usage(user, apply=not dry_run)
            if correction.is_zero:
                continue
            drifted += 1
            self.stdout.write(
                f"  {user.username}: sick {correction.sick:+d}, personal {correction.personal:+d}"
            )

        verb = "would be corrected" if dry_run else "corrected"
        self.stdout.write(
            self.style.SUCCESS(f"✓ Checked {checked} ledger(s), {drifted} {verb}")
        )
