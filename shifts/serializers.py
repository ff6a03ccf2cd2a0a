from rest_framework import serializers

from .models import ShiftEntry


class QualifyingDaysField(serializers.Field):
    """
    Accepts "1-14" / "15+" labels, bucket numbers or a day count.

    The raw value is passed through; the accounting service maps it to its
    bucket (14 or 15).
    """

    def to_internal_value(self, data):
        if data is None or isinstance(data, (str, int)) and not isinstance(data, bool):
            return data
        raise serializers.ValidationError("Expected a string or an integer")

    def to_representation(self, value):
        return value


class ShiftEntrySerializer(serializers.ModelSerializer):
    """Shift entry; writes go through ShiftAccountingService"""

    holiday_id = serializers.IntegerField(write_only=True, required=False, allow_null=True)
    qualifying_days = QualifyingDaysField(required=False, allow_null=True)

    class Meta:
        model = ShiftEntry
        fields = [
            "id",
            "date",
            "entry_type",
            "leave_type",
            "job",
            "subjob",
            "location",
            "shift_type",
            "hours",
            "overtime_hours",
            "travel_hours",
            "rate",
            "overtime_rate",
            "meal",
            "foreman",
            "vessel",
            "will_receive_paystub",
            "holiday",
            "holiday_id",
            "qualifying_days",
            "total_pay",
            "points_earned",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "points_earned", "created_at", "updated_at"]
