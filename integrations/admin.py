from django.contrib import admin

from .models import Holiday


@admin.register(Holiday)
class HolidayAdmin(admin.ModelAdmin):
    list_display = ("date", "name", "qualifying_start", "qualifying_end")
    search_fields = ("name",)
    ordering = ("date",)
    date_hierarchy = "date"
    fieldsets = (
        (None, {"fields": ("date", "name")}),
        (
            "Qualifying window",
            {
                "fields": ("qualifying_start", "qualifying_end"),
                "description": "Leave blank to use the 28 days up to and including the holiday",
            },
        ),
    )
