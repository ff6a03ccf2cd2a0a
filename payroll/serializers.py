from decimal import Decimal

from rest_framework import serializers

from .models import PayOverride


class PayCalculationQuerySerializer(serializers.Serializer):
    """Query parameters of the pay calculation endpoint"""

    job = serializers.CharField()
    subjob = serializers.CharField(required=False, allow_blank=True, default="")
    location = serializers.CharField(required=False, allow_blank=True, default="")
    shift_type = serializers.CharField(required=False, default="day")
    hours = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=Decimal("0"), max_value=Decimal("24"),
        required=False, default=Decimal("8"),
    )
    overtime_hours = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=Decimal("0"), max_value=Decimal("24"),
        required=False, default=Decimal("0"),
    )
    travel_hours = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=Decimal("0"), max_value=Decimal("24"),
        required=False, default=Decimal("0"),
    )
    meal = serializers.BooleanField(required=False, default=False)


class PayBreakdownSerializer(serializers.Serializer):
    job = serializers.CharField()
    subjob = serializers.CharField(allow_blank=True)
    location = serializers.CharField(allow_blank=True)
    shift_type = serializers.CharField()
    hours = serializers.DecimalField(max_digits=5, decimal_places=2)
    overtime_hours = serializers.DecimalField(max_digits=5, decimal_places=2)
    travel_hours = serializers.DecimalField(max_digits=5, decimal_places=2)
    override_applied = serializers.BooleanField()
    differential_class = serializers.CharField()
    differential = serializers.DecimalField(max_digits=5, decimal_places=2)
    job_matched = serializers.BooleanField()
    regular_rate = serializers.DecimalField(max_digits=7, decimal_places=2)
    overtime_rate = serializers.DecimalField(max_digits=7, decimal_places=2)
    regular_pay = serializers.DecimalField(max_digits=10, decimal_places=2)
    overtime_pay = serializers.DecimalField(max_digits=10, decimal_places=2)
    travel_pay = serializers.DecimalField(max_digits=10, decimal_places=2)
    meal_pay = serializers.DecimalField(max_digits=10, decimal_places=2)
    total_pay = serializers.DecimalField(max_digits=10, decimal_places=2)


class PayOverrideSerializer(serializers.ModelSerializer):
    class Meta:
        model = PayOverride
        fields = ["id", "job", "subjob", "location", "shift_type", "hours", "overtime_hours"]
