from django.contrib import admin
from django.db import transaction

from .models import UserLedger


@admin.register(UserLedger)
class UserLedgerAdmin(admin.ModelAdmin):
    list_display = (
        "user",
        "xp",
        "points",
        "sick_days_used",
        "sick_days_available",
        "personal_leave_used",
        "personal_leave_available",
    )
    search_fields = ("user__username",)
    # Counters are maintained by the accounting service
    readonly_fields = ("xp", "points", "sick_days_used", "personal_leave_used", "updated_at")

    def save_model(self, request, obj, form, change):
        if not change:
            super().save_model(request, obj, form, change)
            return
        # Only the edited columns; a full-row save would write back stale counters
        with transaction.atomic():
            UserLedger.objects.select_for_update().get(pk=obj.pk)
            obj.save(update_fields=[*form.changed_data, "updated_at"])
