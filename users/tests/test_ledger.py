"""
Tests for the UserLedger aggregate
"""

from django.contrib.auth.models import User
from django.test import TestCase

from users.models import CounterClamp, UserLedger


class LedgerCreationTest(TestCase):
    def test_ledger_created_with_user(self):
        user = User.objects.create_user(username="dock1", password="pass12345")
        ledger = UserLedger.objects.get(user=user)
        self.assertEqual(ledger.xp, 0)
        self.assertEqual(ledger.sick_days_available, 5)
        self.assertEqual(ledger.personal_leave_available, 3)

    def test_saving_user_again_keeps_single_ledger(self):
        user = User.objects.create_user(username="dock2", password="pass12345")
        user.first_name = "Dock"
        user.save()
        self.assertEqual(UserLedger.objects.filter(user=user).count(), 1)


class ApplyChangesTest(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="dock3", password="pass12345")
        self.ledger = self.user.ledger

    def test_increments_are_persisted(self):
        change = self.ledger.apply_changes(sick=1, xp=10, points=44)
        self.ledger.refresh_from_db()
        self.assertEqual(self.ledger.sick_days_used, 1)
        self.assertEqual(self.ledger.xp, 10)
        self.assertEqual(self.ledger.points, 44)
        self.assertEqual(change.clamps, ())

    def test_decrement_below_zero_is_clamped_and_reported(self):
        with self.assertLogs("users.models", level="WARNING"):
            change = self.ledger.apply_changes(personal=-1)
        self.ledger.refresh_from_db()
        self.assertEqual(self.ledger.personal_leave_used, 0)
        self.assertEqual(change.clamps, (CounterClamp("personal_leave_used", -1, 0),))

    def test_partial_clamp(self):
        self.ledger.apply_changes(sick=1)
        change = self.ledger.apply_changes(sick=-3)
        self.assertEqual(change.sick_days_used, 0)
        self.assertEqual(change.clamps[0].applied, -1)

    def test_zero_delta_is_a_no_op(self):
        change = self.ledger.apply_changes()
        self.assertEqual(change.xp, 0)
        self.assertEqual(change.clamps, ())

    def test_remaining_allowances(self):
        self.ledger.apply_changes(sick=2, personal=4)
        self.assertEqual(self.ledger.sick_days_remaining, 3)
        self.assertEqual(self.ledger.personal_leave_remaining, 0)
