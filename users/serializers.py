# users/serializers.py
from rest_framework import serializers

from django.db import transaction

from gamification.levels import badge_level, progress_to_next_level
from gamification.streaks import compute_streak

from .models import UserLedger


class UserProfileSerializer(serializers.ModelSerializer):
    """Ledger counters with badge, level progress and streak for the profile screen"""

    username = serializers.ReadOnlyField(source="user.username")
    sick_days_remaining = serializers.ReadOnlyField()
    personal_leave_remaining = serializers.ReadOnlyField()
    badge = serializers.SerializerMethodField()
    progress = serializers.SerializerMethodField()
    streak = serializers.SerializerMethodField()

    class Meta:
        model = UserLedger
        fields = [
            "username",
            "xp",
            "points",
            "badge",
            "progress",
            "streak",
            "sick_days_used",
            "sick_days_available",
            "sick_days_remaining",
            "sick_leave_start",
            "sick_leave_end",
            "personal_leave_used",
            "personal_leave_available",
            "personal_leave_remaining",
            "personal_leave_start",
            "personal_leave_end",
            "updated_at",
        ]
        # Counters belong to the accounting service; only allowances are editable here
        read_only_fields = [
            "xp",
            "points",
            "sick_days_used",
            "personal_leave_used",
            "updated_at",
        ]

    def get_badge(self, obj):
        tier = badge_level(obj.xp)
        return {"level": tier.level, "name": tier.name}

    def get_progress(self, obj):
        return progress_to_next_level(obj.xp)._asdict()

    def get_streak(self, obj):
        worked_dates = self.context.get("worked_dates", ())
        return compute_streak(worked_dates)._asdict()

    def update(self, instance, validated_data):
        # Write only the edited columns on a locked row; the counters may have
        # moved since `instance` was read
        with transaction.atomic():
            ledger = UserLedger.objects.select_for_update().get(pk=instance.pk)
            for field, value in validated_data.items():
                setattr(ledger, field, value)
            ledger.save(update_fields=[*validated_data, "updated_at"])
        return ledger

    def validate(self, attrs):
        for start, end in (
            ("sick_leave_start", "sick_leave_end"),
            ("personal_leave_start", "personal_leave_end"),
        ):
            start_value = attrs.get(start, getattr(self.instance, start, None))
            end_value = attrs.get(end, getattr(self.instance, end, None))
            if start_value and end_value and end_value < start_value:
                raise serializers.ValidationError(
                    {end: "Period end must not be before its start"}
                )
        return attrs
