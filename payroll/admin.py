from django.contrib import admin

from .models import PayOverride


@admin.register(PayOverride)
class PayOverrideAdmin(admin.ModelAdmin):
    list_display = ("job", "subjob", "location", "shift_type", "hours", "overtime_hours")
    list_filter = ("shift_type", "location")
    search_fields = ("job", "subjob", "location")
