from django.contrib import admin

from .models import ShiftEntry


@admin.register(ShiftEntry)
class ShiftEntryAdmin(admin.ModelAdmin):
    """
    Read-mostly admin: changes made here bypass the ledger, so run
    ``rebuild_leave_ledgers`` after editing leave entries by hand.
    """

    list_display = ("date", "owner", "entry_type", "leave_type", "job", "total_pay", "points_earned")
    list_filter = ("entry_type", "leave_type", "shift_type")
    search_fields = ("owner__username", "job", "location", "holiday")
    date_hierarchy = "date"
    readonly_fields = ("points_earned", "created_at", "updated_at")
    fieldsets = (
        (None, {"fields": ("owner", "date", "entry_type", "notes")}),
        (
            "Worked",
            {
                "fields": (
                    "job", "subjob", "location", "shift_type",
                    "hours", "overtime_hours", "travel_hours", "meal",
                    "foreman", "vessel", "will_receive_paystub",
                )
            },
        ),
        ("Leave", {"fields": ("leave_type",)}),
        ("Stat holiday", {"fields": ("holiday", "qualifying_days")}),
        ("Pay", {"fields": ("rate", "overtime_rate", "total_pay", "points_earned")}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )
