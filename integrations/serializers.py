from rest_framework import serializers

from .models import Holiday
from .services.holiday_qualification import evaluate_holiday_qualification


class HolidaySerializer(serializers.ModelSerializer):
    """Holiday with the requesting user's qualification, evaluated on read"""

    days_worked = serializers.SerializerMethodField()
    days_required = serializers.SerializerMethodField()
    is_qualified = serializers.SerializerMethodField()
    window_start = serializers.SerializerMethodField()
    window_end = serializers.SerializerMethodField()

    class Meta:
        model = Holiday
        fields = [
            "id",
            "name",
            "date",
            "qualifying_start",
            "qualifying_end",
            "window_start",
            "window_end",
            "days_worked",
            "days_required",
            "is_qualified",
        ]

    def _qualification(self, obj):
        cache = self.context.setdefault("_qualification", {})
        if obj.pk not in cache:
            cache[obj.pk] = evaluate_holiday_qualification(
                obj.date,
                self.context.get("worked_dates", ()),
                obj.qualifying_start,
                obj.qualifying_end,
            )
        return cache[obj.pk]

    def get_days_worked(self, obj):
        return self._qualification(obj).days_worked

    def get_days_required(self, obj):
        return self._qualification(obj).days_required

    def get_is_qualified(self, obj):
        return self._qualification(obj).is_qualified

    def get_window_start(self, obj):
        return self._qualification(obj).qualifying_start

    def get_window_end(self, obj):
        return self._qualification(obj).qualifying_end
