"""
Allowance edits must not write back counters read before a shift mutation
"""

from datetime import date

from django.contrib import admin
from django.contrib.auth.models import User
from django.test import RequestFactory

from shifts.services.accounting import ShiftAccountingService
from tests.base import BaseTestCase
from users.models import UserLedger
from users.serializers import UserProfileSerializer

SICK = {"date": date(2025, 3, 11), "entry_type": "leave", "leave_type": "sick_leave"}


class AllowanceWritesKeepCountersTest(BaseTestCase):
    def setUp(self):
        super().setUp()
        # Read before the shift is recorded
        self.stale = UserLedger.objects.get(user=self.user)
        ShiftAccountingService().create_shift(self.user, SICK)

    def test_profile_serializer_keeps_counters_written_after_read(self):
        serializer = UserProfileSerializer(
            self.stale, data={"sick_days_available": 7}, partial=True
        )
        self.assertTrue(serializer.is_valid(), serializer.errors)
        saved = serializer.save()

        ledger = UserLedger.objects.get(user=self.user)
        self.assertEqual(ledger.sick_days_available, 7)
        self.assertEqual(ledger.sick_days_used, 1)
        self.assertEqual(ledger.xp, 10)
        # Response reflects the stored row, not the stale read
        self.assertEqual(saved.sick_days_used, 1)

    def test_admin_save_keeps_counters_written_after_read(self):
        request = RequestFactory().post("/admin/users/userledger/")
        request.user = User.objects.create_superuser(
            username=f"admin_{self.test_id}", password="testpass123"
        )
        model_admin = admin.site._registry[UserLedger]
        form_class = model_admin.get_form(request, self.stale, change=True)
        form = form_class(
            data={
                "user": self.user.pk,
                "sick_days_available": 9,
                "personal_leave_available": 3,
                "sick_leave_start": "",
                "sick_leave_end": "",
                "personal_leave_start": "",
                "personal_leave_end": "",
            },
            instance=self.stale,
        )
        self.assertTrue(form.is_valid(), form.errors)
        model_admin.save_model(request, form.save(commit=False), form, change=True)

        ledger = UserLedger.objects.get(user=self.user)
        self.assertEqual(ledger.sick_days_available, 9)
        self.assertEqual(ledger.sick_days_used, 1)
        self.assertEqual(ledger.xp, 10)
